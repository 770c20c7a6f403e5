from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ReservationPayload(BaseModel):
    """Arguments of the create-reservation-with-client remote procedure."""

    model_config = ConfigDict(frozen=True)

    full_name: str
    phone: str
    email: str = ""
    booking_date: str  # YYYY-MM-DD
    booking_time: str  # HH:MM
    service_name: str
    total_price: int

    def to_rpc_params(self) -> dict[str, Any]:
        return {f"p_{key}": value for key, value in self.model_dump().items()}
