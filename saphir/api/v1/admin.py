import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Query

from saphir.api.v1.presenters import client_schema, reservation_schema
from saphir.api.v1.schemas import (
    AccountingResponseSchema,
    ChartPointSchema,
    ClientSchema,
    OverviewResponseSchema,
    ReservationSchema,
    StatsSchema,
    StatusUpdateRequestSchema,
)
from saphir.application.exceptions import GatewayError
from saphir.application.ports.clock import ClockPort
from saphir.application.use_cases.admin_dashboard import AdminDashboardUseCase
from saphir.application.use_cases.submit_reservation import GENERIC_FAILURE_NOTICE
from saphir.application.utils.formatting import format_price
from saphir.core.config import settings
from saphir.wiring.dependencies import get_admin_dashboard, get_clock

router = APIRouter()
logger = logging.getLogger(__name__)


def _unavailable(e: GatewayError) -> HTTPException:
    logger.error("Back-office data unavailable", extra={"reason": str(e)})
    return HTTPException(status_code=502, detail=GENERIC_FAILURE_NOTICE)


@router.get("/overview", response_model=OverviewResponseSchema)
def overview(
    search: str = "",
    dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard),
    clock: ClockPort = Depends(get_clock),
):
    try:
        result = dashboard.overview(search, clock.now().date())
    except GatewayError as e:
        raise _unavailable(e)

    return OverviewResponseSchema(
        stats=StatsSchema(
            revenue=result.stats.revenue,
            revenue_label=f"{format_price(result.stats.revenue)} {settings.CURRENCY_LABEL}",
            confirmed_count=result.stats.confirmed_count,
            today_count=result.stats.today_count,
        ),
        reservations=[
            reservation_schema(r, contact_link=dashboard.contact_link(r.client_phone))
            for r in result.reservations
        ],
    )


@router.get("/accounting", response_model=AccountingResponseSchema)
def accounting(dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard)):
    try:
        report = dashboard.accounting()
    except GatewayError as e:
        raise _unavailable(e)

    return AccountingResponseSchema(
        revenue_by_status={status.value: total for status, total in report.revenue_by_status.items()},
        revenue_by_service=report.revenue_by_service,
        earned_revenue=report.earned_revenue,
        average_basket=report.average_basket,
    )


@router.get("/clients", response_model=list[ClientSchema])
def clients(search: str = "", dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard)):
    try:
        found = dashboard.clients(search)
    except GatewayError as e:
        raise _unavailable(e)
    return [client_schema(c, contact_link=dashboard.contact_link(c.phone)) for c in found]


@router.patch("/reservations/{reservation_id}/status", response_model=ReservationSchema)
def update_status(
    reservation_id: str,
    req: StatusUpdateRequestSchema,
    dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard),
):
    try:
        dashboard.update_status(reservation_id, req.status)
    except GatewayError as e:
        raise _unavailable(e)

    updated = next((r for r in dashboard.reservations() if r.reservation_id == reservation_id), None)
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Reservation '{reservation_id}' not found")
    return reservation_schema(updated, contact_link=dashboard.contact_link(updated.client_phone))


@router.get("/revenue-chart", response_model=list[ChartPointSchema])
def revenue_chart(
    days: int = Query(14, ge=1, le=90),
    dashboard: AdminDashboardUseCase = Depends(get_admin_dashboard),
    clock: ClockPort = Depends(get_clock),
):
    start = clock.now().date() - timedelta(days=days - 1)
    try:
        points = dashboard.revenue_chart(start, days)
    except GatewayError as e:
        raise _unavailable(e)
    return [ChartPointSchema(day=p.day, total=p.total, x=p.x, y=p.y) for p in points]
