from __future__ import annotations

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response
from pydantic import ValidationError

from saphir.application.dto.change_event import ChangeEventDTO
from saphir.application.exceptions import GatewayError
from saphir.application.use_cases.admin_dashboard import AdminDashboardUseCase
from saphir.core.config import settings
from saphir.domain.entities.change_event import ChangeEvent
from saphir.infrastructure.supabase.webhook_verify import verify_signature
from saphir.wiring.dependencies import get_admin_dashboard


router = APIRouter()
logger = logging.getLogger(__name__)


def _apply_change(dashboard: AdminDashboardUseCase, event: ChangeEvent) -> None:
    try:
        dashboard.apply_change(event)
    except GatewayError as e:
        logger.error("Failed to apply change event", extra={"event_type": event.event_type, "reason": str(e)})


@router.post("/webhooks/reservations")
async def reservations_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard),
) -> Response:
    body = await request.body()
    signature = request.headers.get("X-Webhook-Signature")
    if not verify_signature(body, signature, settings.WEBHOOK_SECRET, settings.ENV):
        return Response(status_code=403)

    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
        event = ChangeEventDTO.model_validate(payload).to_event()
    except (ValueError, ValidationError):
        logger.exception("Failed to parse change event")
        return Response(status_code=400)

    # Reloads hit the gateway; keep them off the event loop.
    background_tasks.add_task(_apply_change, dashboard, event)
    return Response(status_code=200)
