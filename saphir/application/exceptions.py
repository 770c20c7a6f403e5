class BookingError(RuntimeError):
    """Base class for errors scoped to a booking session or back-office action."""
    pass


class MissingRequiredField(BookingError):
    """Raised when a step or a submission lacks required fields."""

    def __init__(self, fields: list[str] | tuple[str, ...]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InvalidSelection(BookingError):
    """Raised when an option id does not belong to its option group."""
    pass


class InvalidTimeSlot(BookingError):
    """Raised when a time is not one of the offered slots."""
    pass


class ServiceNotFound(BookingError):
    pass


class DraftNotFound(BookingError):
    pass


class ReservationNotFound(BookingError):
    pass


class SubmissionInProgress(BookingError):
    """Raised when a draft is submitted again while its first submission is pending."""
    pass


class SubmissionFailed(BookingError):
    """Raised when the persistence collaborator rejects a reservation. The draft is kept for retry."""
    pass


class GatewayError(RuntimeError):
    """Raised when the persistence backend fails (network errors, rejected calls, bad payloads)."""
    pass
