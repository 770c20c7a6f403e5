from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChangeEvent:
    event_type: str  # "INSERT", "UPDATE", "DELETE"
    table: str
    record: dict[str, Any] | None = None
    old_record: dict[str, Any] | None = None
