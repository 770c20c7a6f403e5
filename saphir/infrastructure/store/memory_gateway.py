from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date, datetime, timezone

from saphir.application.dto.reservation_payload import ReservationPayload
from saphir.application.exceptions import GatewayError
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.domain.entities.reservation import Client, Reservation, ReservationStatus


class MemoryReservationGateway(ReservationGatewayPort):
    """In-process stand-in for the remote database: reservation insert + client upsert keyed by phone."""

    def __init__(self) -> None:
        self._reservations: dict[str, Reservation] = {}
        self._clients: dict[str, Client] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create_reservation_with_client(self, payload: ReservationPayload) -> None:
        try:
            booking_date = date.fromisoformat(payload.booking_date)
        except ValueError as e:
            raise GatewayError(f"Invalid booking date '{payload.booking_date}'") from e

        with self._lock:
            client = self._clients.get(payload.phone)
            if client is None:
                client = Client(
                    client_id=f"client_{len(self._clients) + 1}",
                    full_name=payload.full_name,
                    phone=payload.phone,
                    email=payload.email,
                )
            self._clients[payload.phone] = replace(
                client,
                full_name=payload.full_name,
                email=payload.email or client.email,
                total_reservations=client.total_reservations + 1,
            )

            reservation_id = f"res_{len(self._reservations) + 1}"
            self._reservations[reservation_id] = Reservation(
                reservation_id=reservation_id,
                client_name=payload.full_name,
                client_phone=payload.phone,
                client_email=payload.email,
                booking_date=booking_date,
                booking_time=payload.booking_time,
                service_name=payload.service_name,
                total_price=payload.total_price,
                status=ReservationStatus.PENDING,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
        self._logger.info(
            "Memory reservation created",
            extra={"reservation_id": reservation_id, "service": payload.service_name},
        )

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return None
            return self._with_client_total(reservation)

    def list_reservations(self) -> list[Reservation]:
        with self._lock:
            rows = [self._with_client_total(r) for r in self._reservations.values()]
        return sorted(rows, key=lambda r: r.booking_date or date.max)

    def list_clients(self) -> list[Client]:
        with self._lock:
            clients = list(self._clients.values())
        return sorted(clients, key=lambda c: c.total_reservations, reverse=True)

    def update_status(self, reservation_id: str, status: ReservationStatus) -> None:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                raise GatewayError(f"Reservation '{reservation_id}' not found")
            self._reservations[reservation_id] = replace(reservation, status=status)

    def _with_client_total(self, reservation: Reservation) -> Reservation:
        client = self._clients.get(reservation.client_phone)
        total = client.total_reservations if client else 0
        return replace(reservation, client_total_reservations=total)
