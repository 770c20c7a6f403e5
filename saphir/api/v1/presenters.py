from __future__ import annotations

from saphir.api.v1.schemas import (
    ClientSchema,
    DraftResponseSchema,
    OptionGroupSchema,
    OptionSchema,
    ReservationSchema,
    SelectionsSchema,
    ServiceSchema,
)
from saphir.application.use_cases.admin_dashboard import loyalty_badge
from saphir.application.use_cases.booking import DraftView
from saphir.domain.entities.reservation import Client, Reservation
from saphir.domain.entities.reservation_draft import Selections
from saphir.domain.entities.service_catalog import Service


def service_schema(service: Service) -> ServiceSchema:
    return ServiceSchema(
        id=service.service_id,
        name=service.name,
        category=service.category,
        description=service.description,
        duration=service.duration,
        price=service.base_price,
        image=service.image,
        options=[
            OptionGroupSchema(
                category=group.category,
                default_option_id=group.default_option_id,
                options=[OptionSchema(id=o.option_id, name=o.name, price=o.price_delta) for o in group.options],
            )
            for group in service.options.values()
        ],
    )


def selections_schema(selections: Selections) -> SelectionsSchema:
    return SelectionsSchema(oil=selections.oil_id, music=selections.music_id, intensity=selections.intensity_id)


def draft_schema(view: DraftView) -> DraftResponseSchema:
    draft = view.draft
    return DraftResponseSchema(
        draft_id=draft.draft_id or "",
        service_id=draft.service_id,
        service_name=view.service.name,
        step=int(draft.step),
        selections=selections_schema(draft.selections),
        option_names={category.value: name for category, name in view.option_names.items()},
        booking_date=draft.booking_date,
        date_label=view.date_label,
        booking_time=draft.booking_time,
        name=draft.name,
        phone=draft.phone,
        email=draft.email,
        total=view.total,
        can_continue=view.can_continue,
        can_submit=view.can_submit,
        submitting=draft.submitting,
        available_dates=view.available_dates,
        time_slots=view.time_slots,
    )


def reservation_schema(reservation: Reservation, contact_link: str | None = None) -> ReservationSchema:
    return ReservationSchema(
        id=reservation.reservation_id,
        client_name=reservation.client_name,
        client_phone=reservation.client_phone,
        client_email=reservation.client_email,
        booking_date=reservation.booking_date,
        booking_time=reservation.booking_time,
        service_name=reservation.service_name,
        total_price=reservation.total_price,
        status=reservation.status,
        status_label=reservation.status.label,
        progress_step=reservation.status.progress_step,
        client_total_reservations=reservation.client_total_reservations,
        badge=loyalty_badge(reservation.client_total_reservations),
        contact_link=contact_link,
    )


def client_schema(client: Client, contact_link: str | None = None) -> ClientSchema:
    return ClientSchema(
        id=client.client_id,
        full_name=client.full_name,
        phone=client.phone,
        email=client.email,
        total_reservations=client.total_reservations,
        badge=loyalty_badge(client.total_reservations),
        contact_link=contact_link,
    )
