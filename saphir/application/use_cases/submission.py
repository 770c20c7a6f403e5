from __future__ import annotations

from saphir.application.dto.reservation_payload import ReservationPayload
from saphir.application.use_cases.pricing import price_breakdown
from saphir.application.use_cases.reservation_flow import validate_for_submission
from saphir.application.utils.formatting import format_long_date, format_price, normalize_phone
from saphir.domain.entities.reservation_draft import ReservationDraft
from saphir.domain.entities.service_catalog import OptionCategory, Service

MESSAGE_TEMPLATE = (
    "✨ NOUVELLE RÉSERVATION SAPHIR ✨\n"
    "\n"
    "📋 Prestation : {service}\n"
    "📅 Date : {date} à {time}\n"
    "\n"
    "🌿 Options :\n"
    "• {oil}\n"
    "• {music}\n"
    "• {intensity}\n"
    "\n"
    "👤 Client : {client}\n"
    "💎 Total : {total} {currency}"
)


def to_persistence_payload(draft: ReservationDraft, service: Service) -> ReservationPayload:
    validate_for_submission(draft)
    return ReservationPayload(
        full_name=draft.name,
        phone=normalize_phone(draft.phone),
        email=draft.email or "",
        booking_date=draft.booking_date.isoformat(),  # type: ignore[union-attr]
        booking_time=draft.booking_time or "",
        service_name=service.name,
        total_price=price_breakdown(service, draft.selections).total,
    )


def to_human_message(draft: ReservationDraft, service: Service, currency: str = "FCFA") -> str:
    breakdown = price_breakdown(service, draft.selections)
    return MESSAGE_TEMPLATE.format(
        service=service.name,
        date=format_long_date(draft.booking_date) if draft.booking_date else "",
        time=draft.booking_time or "",
        oil=breakdown.options[OptionCategory.OIL].name,
        music=breakdown.options[OptionCategory.MUSIC].name,
        intensity=breakdown.options[OptionCategory.INTENSITY].name,
        client=draft.name,
        total=format_price(breakdown.total),
        currency=currency,
    )
