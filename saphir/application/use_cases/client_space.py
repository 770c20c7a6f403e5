from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from saphir.application.exceptions import ReservationNotFound
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.application.utils.formatting import normalize_phone
from saphir.domain.entities.reservation import Reservation, ReservationStatus

HISTORY_LIMIT = 5


@dataclass(frozen=True)
class Tracking:
    current: Reservation | None
    progress_step: int | None
    history: list[Reservation]


def _newest_first(reservations: Iterable[Reservation]) -> list[Reservation]:
    # Missing dates/times sort last.
    return sorted(
        reservations,
        key=lambda r: (r.booking_date.isoformat() if r.booking_date else "", r.booking_time or ""),
        reverse=True,
    )


def track(reservations: Iterable[Reservation]) -> Tracking:
    ordered = _newest_first(reservations)
    current = next((r for r in ordered if not r.status.is_final), None)
    history = [r for r in ordered if r.status is ReservationStatus.COMPLETED][:HISTORY_LIMIT]
    return Tracking(
        current=current,
        progress_step=current.status.progress_step if current else None,
        history=history,
    )


class ClientSpaceUseCase:
    def __init__(self, gateway: ReservationGatewayPort) -> None:
        self._gateway = gateway

    def execute(self, phone: str) -> Tracking:
        """Tracking for the reservations booked with this phone number."""
        wanted = normalize_phone(phone)
        mine = [r for r in self._gateway.list_reservations() if normalize_phone(r.client_phone) == wanted]
        return track(mine)

    def reservation(self, reservation_id: str) -> Reservation:
        """Single reservation looked up by the id shared in the confirmation link."""
        reservation = self._gateway.get_reservation(reservation_id)
        if reservation is None:
            raise ReservationNotFound(f"Reservation '{reservation_id}' not found")
        return reservation
