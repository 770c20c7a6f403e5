from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from saphir.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    def __init__(self, timezone: ZoneInfo) -> None:
        self._timezone = timezone

    def now(self) -> datetime:
        return datetime.now(self._timezone)


class FixedClock(ClockPort):
    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
