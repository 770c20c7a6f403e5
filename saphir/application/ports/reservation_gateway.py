from __future__ import annotations

from abc import ABC, abstractmethod

from saphir.application.dto.reservation_payload import ReservationPayload
from saphir.domain.entities.reservation import Client, Reservation, ReservationStatus


class ReservationGatewayPort(ABC):
    @abstractmethod
    def create_reservation_with_client(self, payload: ReservationPayload) -> None:
        """
        Create the reservation and upsert its client in one atomic call.
        Raises GatewayError if the backend rejects the call.
        """
        raise NotImplementedError

    @abstractmethod
    def get_reservation(self, reservation_id: str) -> Reservation | None:
        """One reservation with its client total, or None if the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_reservations(self) -> list[Reservation]:
        """All reservations ordered by booking date ascending."""
        raise NotImplementedError

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """All clients ordered by total reservations descending."""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, reservation_id: str, status: ReservationStatus) -> None:
        raise NotImplementedError
