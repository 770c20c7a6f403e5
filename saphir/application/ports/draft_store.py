from __future__ import annotations

from abc import ABC, abstractmethod

from saphir.domain.entities.reservation_draft import ReservationDraft


class DraftStorePort(ABC):
    @abstractmethod
    def create(self, draft: ReservationDraft) -> ReservationDraft:
        """Store a new draft and return it with its draft_id set."""
        raise NotImplementedError

    @abstractmethod
    def get(self, draft_id: str) -> ReservationDraft | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, draft: ReservationDraft) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, draft_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def claim_submission(self, draft_id: str) -> ReservationDraft | None:
        """
        Atomically flag the draft as submitting.
        Returns the flagged draft, or None if a submission is already pending or the draft is gone.
        """
        raise NotImplementedError

    @abstractmethod
    def release_submission(self, draft_id: str) -> None:
        """Clear the submitting flag on the stored draft, keeping every other field."""
        raise NotImplementedError
