from __future__ import annotations

from datetime import date, datetime, timedelta

from saphir.application.ports.clock import ClockPort

TIME_SLOTS: tuple[str, ...] = (
    "09:00",
    "10:00",
    "11:00",
    "14:00",
    "15:00",
    "16:00",
    "17:00",
    "18:00",
)

BOOKING_WINDOW_DAYS = 14


def list_available_dates(reference: datetime | date, days: int = BOOKING_WINDOW_DAYS) -> list[date]:
    """The `days` calendar days following `reference`; the reference day itself is excluded."""
    start = reference.date() if isinstance(reference, datetime) else reference
    return [start + timedelta(days=offset) for offset in range(1, days + 1)]


def list_time_slots() -> list[str]:
    return list(TIME_SLOTS)


class AvailabilityProvider:
    """Selectable dates and daily slots. Existing bookings are not taken into account."""

    def __init__(self, clock: ClockPort, days: int = BOOKING_WINDOW_DAYS) -> None:
        self._clock = clock
        self._days = days

    def list_available_dates(self) -> list[date]:
        return list_available_dates(self._clock.now(), self._days)

    def list_time_slots(self) -> list[str]:
        return list_time_slots()
