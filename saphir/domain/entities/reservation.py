from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    PENDING = "en_attente"
    CONFIRMED = "confirme"
    PREPARATION = "preparation"
    IN_CARE = "soin_en_cours"
    COMPLETED = "termine"
    CANCELLED = "annule"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def progress_step(self) -> int | None:
        return STATUS_PROGRESS.get(self)

    @property
    def is_final(self) -> bool:
        return self in (ReservationStatus.COMPLETED, ReservationStatus.CANCELLED)


STATUS_LABELS: dict[ReservationStatus, str] = {
    ReservationStatus.PENDING: "En attente",
    ReservationStatus.CONFIRMED: "Confirmé",
    ReservationStatus.PREPARATION: "Préparation",
    ReservationStatus.IN_CARE: "Soin en cours",
    ReservationStatus.COMPLETED: "Terminé",
    ReservationStatus.CANCELLED: "Annulé",
}

# Tracking view steps; a cancelled reservation has no progress.
STATUS_PROGRESS: dict[ReservationStatus, int] = {
    ReservationStatus.PENDING: 0,
    ReservationStatus.CONFIRMED: 1,
    ReservationStatus.PREPARATION: 2,
    ReservationStatus.IN_CARE: 3,
    ReservationStatus.COMPLETED: 4,
}


@dataclass(frozen=True)
class Reservation:
    reservation_id: str
    client_name: str
    client_phone: str
    booking_date: date | None
    booking_time: str | None
    service_name: str
    total_price: int
    status: ReservationStatus = ReservationStatus.PENDING
    client_email: str = ""
    created_at: str | None = None
    client_total_reservations: int = 0


@dataclass(frozen=True)
class Client:
    client_id: str
    full_name: str
    phone: str
    email: str = ""
    total_reservations: int = 0
