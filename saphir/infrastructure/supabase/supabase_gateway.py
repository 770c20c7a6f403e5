from __future__ import annotations

import logging

from saphir.application.dto.reservation_payload import ReservationPayload
from saphir.application.ports.reservation_gateway import ReservationGatewayPort
from saphir.application.utils.records import client_from_record, reservation_from_record
from saphir.domain.entities.reservation import Client, Reservation, ReservationStatus
from saphir.infrastructure.supabase.supabase_client import SupabaseClient

RESERVATION_COLUMNS = "*, clients!fk_reservation_client_unique(*)"


class SupabaseReservationGateway(ReservationGatewayPort):
    def __init__(self, client: SupabaseClient, create_function: str = "create_reservation_with_client") -> None:
        self._client = client
        self._create_function = create_function
        self._logger = logging.getLogger(__name__)

    def create_reservation_with_client(self, payload: ReservationPayload) -> None:
        self._client.rpc(self._create_function, payload.to_rpc_params())
        self._logger.info("Reservation created", extra={"service": payload.service_name})

    def get_reservation(self, reservation_id: str) -> Reservation | None:
        rows = self._client.select("reservations", RESERVATION_COLUMNS, filters={"id": f"eq.{reservation_id}"})
        return reservation_from_record(rows[0]) if rows else None

    def list_reservations(self) -> list[Reservation]:
        rows = self._client.select("reservations", RESERVATION_COLUMNS, order="booking_date.asc")
        return [reservation_from_record(row) for row in rows]

    def list_clients(self) -> list[Client]:
        rows = self._client.select("clients", "*", order="total_reservations.desc")
        return [client_from_record(row) for row in rows]

    def update_status(self, reservation_id: str, status: ReservationStatus) -> None:
        self._client.update("reservations", {"status": status.value}, {"id": f"eq.{reservation_id}"})
