from __future__ import annotations

import threading
import uuid
from dataclasses import replace

from saphir.application.ports.draft_store import DraftStorePort
from saphir.domain.entities.reservation_draft import ReservationDraft


class MemoryDraftStore(DraftStorePort):
    def __init__(self) -> None:
        self._drafts: dict[str, ReservationDraft] = {}
        self._lock = threading.Lock()

    def create(self, draft: ReservationDraft) -> ReservationDraft:
        stored = replace(draft, draft_id=uuid.uuid4().hex)
        with self._lock:
            self._drafts[stored.draft_id] = stored  # type: ignore[index]
        return stored

    def get(self, draft_id: str) -> ReservationDraft | None:
        with self._lock:
            return self._drafts.get(draft_id)

    def put(self, draft: ReservationDraft) -> None:
        if not draft.draft_id:
            raise ValueError("Cannot store a draft without draft_id")
        with self._lock:
            self._drafts[draft.draft_id] = draft

    def delete(self, draft_id: str) -> None:
        with self._lock:
            self._drafts.pop(draft_id, None)

    def claim_submission(self, draft_id: str) -> ReservationDraft | None:
        with self._lock:
            draft = self._drafts.get(draft_id)
            if draft is None or draft.submitting:
                return None
            claimed = replace(draft, submitting=True)
            self._drafts[draft_id] = claimed
            return claimed

    def release_submission(self, draft_id: str) -> None:
        with self._lock:
            draft = self._drafts.get(draft_id)
            if draft is not None and draft.submitting:
                self._drafts[draft_id] = replace(draft, submitting=False)
