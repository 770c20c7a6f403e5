from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from saphir.application.exceptions import DraftNotFound, ServiceNotFound, SubmissionInProgress
from saphir.application.ports.draft_store import DraftStorePort
from saphir.application.ports.service_catalog import ServiceCatalogPort
from saphir.application.use_cases.availability import AvailabilityProvider
from saphir.application.use_cases.pricing import price_breakdown
from saphir.application.use_cases.reservation_flow import (
    Close,
    DraftEvent,
    can_continue,
    dispatch,
    missing_submission_fields,
    new_draft,
)
from saphir.application.utils.formatting import format_short_date
from saphir.domain.entities.reservation_draft import ReservationDraft
from saphir.domain.entities.service_catalog import OptionCategory, Service


@dataclass(frozen=True)
class DraftView:
    draft: ReservationDraft
    service: Service
    total: int
    option_names: dict[OptionCategory, str]
    date_label: str
    can_continue: bool
    can_submit: bool
    available_dates: list[date]
    time_slots: list[str]


class BookingUseCase:
    """Booking sessions: one draft per opened booking flow."""

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        drafts: DraftStorePort,
        availability: AvailabilityProvider,
    ) -> None:
        self._catalog = catalog
        self._drafts = drafts
        self._availability = availability
        self._logger = logging.getLogger(__name__)

    def open(self, service_id: str) -> ReservationDraft:
        service = self.get_service(service_id)
        draft = self._drafts.create(new_draft(service))
        self._logger.info("Booking draft opened", extra={"draft_id": draft.draft_id, "service": service.service_id})
        return draft

    def get(self, draft_id: str) -> ReservationDraft:
        draft = self._drafts.get(draft_id)
        if draft is None:
            raise DraftNotFound(f"Draft '{draft_id}' not found")
        return draft

    def apply(self, draft_id: str, event: DraftEvent) -> ReservationDraft:
        """Run one wizard event. On error the stored draft is left unchanged."""
        draft = self.get(draft_id)
        self._ensure_editable(draft)
        service = self.get_service(draft.service_id)
        updated = dispatch(draft, event, service, self._availability.list_time_slots())
        self._drafts.put(updated)
        return updated

    def reset(self, draft_id: str) -> ReservationDraft:
        return self.apply(draft_id, Close())

    def close(self, draft_id: str) -> None:
        self._ensure_editable(self.get(draft_id))
        self._drafts.delete(draft_id)
        self._logger.info("Booking draft closed", extra={"draft_id": draft_id})

    def view(self, draft_id: str) -> DraftView:
        draft = self.get(draft_id)
        service = self.get_service(draft.service_id)
        breakdown = price_breakdown(service, draft.selections)
        date_label = format_short_date(draft.booking_date) if draft.booking_date else "-"
        return DraftView(
            draft=draft,
            service=service,
            total=breakdown.total,
            option_names={category: opt.name for category, opt in breakdown.options.items()},
            date_label=date_label,
            can_continue=can_continue(draft),
            can_submit=not missing_submission_fields(draft) and not draft.submitting,
            available_dates=self._availability.list_available_dates(),
            time_slots=self._availability.list_time_slots(),
        )

    def get_service(self, service_id: str) -> Service:
        service = self._catalog.get_service(service_id)
        if service is None:
            raise ServiceNotFound(f"Service '{service_id}' not found")
        return service

    def _ensure_editable(self, draft: ReservationDraft) -> None:
        if draft.submitting:
            raise SubmissionInProgress(f"Draft '{draft.draft_id}' is being submitted")
