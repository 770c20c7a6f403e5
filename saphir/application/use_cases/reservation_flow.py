from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Union

from saphir.application.exceptions import InvalidTimeSlot, MissingRequiredField
from saphir.application.use_cases.availability import TIME_SLOTS
from saphir.application.use_cases.pricing import default_selections, resolve_option
from saphir.domain.entities.reservation_draft import ReservationDraft, Selections, WizardStep
from saphir.domain.entities.service_catalog import OptionCategory, Service

CONTACT_FIELDS = ("name", "phone", "email")


@dataclass(frozen=True)
class SelectOption:
    category: OptionCategory
    option_id: str


@dataclass(frozen=True)
class SelectDate:
    value: date


@dataclass(frozen=True)
class SelectTime:
    value: str


@dataclass(frozen=True)
class SetContact:
    field: str
    value: str


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Close:
    pass


DraftEvent = Union[SelectOption, SelectDate, SelectTime, SetContact, Continue, Back, Close]


def new_draft(service: Service, draft_id: str | None = None) -> ReservationDraft:
    """Step 1 with every option group on its default option."""
    return ReservationDraft(
        service_id=service.service_id,
        selections=default_selections(service),
        draft_id=draft_id,
    )


def missing_schedule_fields(draft: ReservationDraft) -> list[str]:
    missing = []
    if draft.booking_date is None:
        missing.append("date")
    if not draft.booking_time:
        missing.append("time")
    return missing


def missing_submission_fields(draft: ReservationDraft) -> list[str]:
    missing = []
    if draft.booking_date is None:
        missing.append("date")
    if not draft.name:
        missing.append("name")
    if not draft.phone:
        missing.append("phone")
    return missing


def can_continue(draft: ReservationDraft) -> bool:
    if draft.step == WizardStep.CUSTOMIZE:
        return True
    if draft.step == WizardStep.SCHEDULE:
        return not missing_schedule_fields(draft)
    return False


def validate_for_submission(draft: ReservationDraft) -> None:
    """Date, name and phone are required; email is optional."""
    missing = missing_submission_fields(draft)
    if missing:
        raise MissingRequiredField(missing)


def _with_selection(draft: ReservationDraft, category: OptionCategory, option_id: str) -> ReservationDraft:
    current = draft.selections
    if category is OptionCategory.OIL:
        selections = Selections(option_id, current.music_id, current.intensity_id)
    elif category is OptionCategory.MUSIC:
        selections = Selections(current.oil_id, option_id, current.intensity_id)
    else:
        selections = Selections(current.oil_id, current.music_id, option_id)
    return replace(draft, selections=selections)


def dispatch(
    draft: ReservationDraft,
    event: DraftEvent,
    service: Service,
    time_slots: Iterable[str] = TIME_SLOTS,
) -> ReservationDraft:
    """
    Pure transition function of the booking wizard.
    Returns the next draft; invalid events raise and leave `draft` untouched.
    """
    if isinstance(event, SelectOption):
        resolve_option(service, event.category, event.option_id)
        return _with_selection(draft, event.category, event.option_id)

    if isinstance(event, SelectDate):
        return replace(draft, booking_date=event.value)

    if isinstance(event, SelectTime):
        if event.value not in tuple(time_slots):
            raise InvalidTimeSlot(f"'{event.value}' is not an offered time slot")
        return replace(draft, booking_time=event.value)

    if isinstance(event, SetContact):
        if event.field not in CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field '{event.field}'")
        return replace(draft, **{event.field: event.value})

    if isinstance(event, Continue):
        if draft.step == WizardStep.CUSTOMIZE:
            return replace(draft, step=WizardStep.SCHEDULE)
        if draft.step == WizardStep.SCHEDULE and not missing_schedule_fields(draft):
            return replace(draft, step=WizardStep.CONTACT)
        # Blocked at step 2 until date and time are set; no-op at step 3.
        return draft

    if isinstance(event, Back):
        if draft.step == WizardStep.CUSTOMIZE:
            return draft
        return replace(draft, step=WizardStep(draft.step - 1))

    if isinstance(event, Close):
        return new_draft(service, draft_id=draft.draft_id)

    raise TypeError(f"Unsupported draft event: {type(event).__name__}")
