from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from saphir.application.exceptions import (
    DraftNotFound,
    GatewayError,
    ServiceNotFound,
    SubmissionFailed,
    SubmissionInProgress,
)
from saphir.application.ports.draft_store import DraftStorePort
from saphir.application.ports.message_platform import MessagePlatformPort
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.application.ports.service_catalog import ServiceCatalogPort
from saphir.application.use_cases.reservation_flow import new_draft
from saphir.application.use_cases.submission import to_human_message, to_persistence_payload

GENERIC_FAILURE_NOTICE = "Une erreur est survenue"


@dataclass(frozen=True)
class BookingConfirmation:
    service_name: str
    booking_date: date
    booking_time: str
    client_name: str
    total: int
    message: str
    chat_link: str


class SubmitReservationUseCase:
    def __init__(
        self,
        catalog: ServiceCatalogPort,
        drafts: DraftStorePort,
        gateway: ReservationGatewayPort,
        platform: MessagePlatformPort,
        currency: str = "FCFA",
    ) -> None:
        self._catalog = catalog
        self._drafts = drafts
        self._gateway = gateway
        self._platform = platform
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    def execute(self, draft_id: str) -> BookingConfirmation:
        """
        Submit a draft to the persistence collaborator.
        On success the draft is reset to its initial state; on failure it is kept as-is for a retry.
        """
        draft = self._drafts.get(draft_id)
        if draft is None:
            raise DraftNotFound(f"Draft '{draft_id}' not found")
        service = self._catalog.get_service(draft.service_id)
        if service is None:
            raise ServiceNotFound(f"Service '{draft.service_id}' not found")

        payload = to_persistence_payload(draft, service)
        message = to_human_message(draft, service, self._currency)

        if self._drafts.claim_submission(draft_id) is None:
            raise SubmissionInProgress(f"Draft '{draft_id}' is already being submitted")

        try:
            self._gateway.create_reservation_with_client(payload)
        except GatewayError as e:
            self._logger.error(
                "Reservation submission failed",
                extra={"draft_id": draft_id, "service": service.service_id, "reason": str(e)},
            )
            self._drafts.release_submission(draft_id)
            raise SubmissionFailed(GENERIC_FAILURE_NOTICE) from e
        except Exception as e:
            self._logger.exception(
                "Unexpected error during reservation submission",
                extra={"draft_id": draft_id, "service": service.service_id, "reason": str(e)},
            )
            self._drafts.release_submission(draft_id)
            raise SubmissionFailed(GENERIC_FAILURE_NOTICE) from e

        self._logger.info(
            "Reservation submitted",
            extra={"draft_id": draft_id, "service": service.service_id},
        )
        self._drafts.put(new_draft(service, draft_id=draft_id))

        return BookingConfirmation(
            service_name=service.name,
            booking_date=draft.booking_date,  # type: ignore[arg-type]
            booking_time=draft.booking_time or "",
            client_name=draft.name,
            total=payload.total_price,
            message=message,
            chat_link=self._platform.build_chat_link(text=message),
        )
