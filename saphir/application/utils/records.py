from __future__ import annotations

import logging
from datetime import date
from typing import Any

from saphir.domain.entities.reservation import Client, Reservation, ReservationStatus

logger = logging.getLogger(__name__)


def parse_status(value: Any) -> ReservationStatus:
    try:
        return ReservationStatus(value)
    except ValueError:
        logger.warning("Unknown reservation status, treating as pending", extra={"status": value})
        return ReservationStatus.PENDING


def parse_date(value: Any) -> date | None:
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def reservation_from_record(data: dict[str, Any]) -> Reservation:
    """Row of the reservations table, optionally joined with its client ("clients" object or list)."""
    joined = data.get("clients")
    if isinstance(joined, list):
        joined = joined[0] if joined else None
    total_reservations = (joined or {}).get("total_reservations") or 0

    return Reservation(
        reservation_id=str(data.get("id")),
        client_name=data.get("client_name") or "",
        client_phone=data.get("client_phone") or "",
        client_email=data.get("client_email") or "",
        booking_date=parse_date(data.get("booking_date")),
        booking_time=data.get("booking_time"),
        service_name=data.get("service_name") or "",
        total_price=int(data.get("total_price") or 0),
        status=parse_status(data.get("status") or ReservationStatus.PENDING.value),
        created_at=data.get("created_at"),
        client_total_reservations=int(total_reservations),
    )


def reservation_to_record(reservation: Reservation) -> dict[str, Any]:
    return {
        "id": reservation.reservation_id,
        "client_name": reservation.client_name,
        "client_phone": reservation.client_phone,
        "client_email": reservation.client_email,
        "booking_date": reservation.booking_date.isoformat() if reservation.booking_date else None,
        "booking_time": reservation.booking_time,
        "service_name": reservation.service_name,
        "total_price": reservation.total_price,
        "status": reservation.status.value,
        "created_at": reservation.created_at,
    }


def client_from_record(data: dict[str, Any]) -> Client:
    return Client(
        client_id=str(data.get("id")),
        full_name=data.get("full_name") or "",
        phone=data.get("phone") or "",
        email=data.get("email") or "",
        total_reservations=int(data.get("total_reservations") or 0),
    )
