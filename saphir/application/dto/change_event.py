from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from saphir.domain.entities.change_event import ChangeEvent


class ChangeEventDTO(BaseModel):
    """Database webhook body: {"type", "table", "schema", "record", "old_record"}."""

    type: str
    table: str = "reservations"
    db_schema: str | None = Field(default=None, alias="schema")
    record: dict[str, Any] | None = None
    old_record: dict[str, Any] | None = None

    def to_event(self) -> ChangeEvent:
        return ChangeEvent(
            event_type=self.type.upper(),
            table=self.table,
            record=dict(self.record) if self.record is not None else None,
            old_record=dict(self.old_record) if self.old_record is not None else None,
        )
