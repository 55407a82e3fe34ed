"""Error kinds for the booking rules engine."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Recoverable, user-facing failure kinds."""

    INVALID_LESSON = "InvalidLesson"
    INVALID_BOOKING = "InvalidBooking"
    INVALID_LEARNER = "InvalidLearner"
    INVALID_DATE = "InvalidDate"
    INVALID_RATING = "InvalidRating"
    NO_SLOTS_AVAILABLE = "NoSlotsAvailable"
    ALREADY_REGISTERED = "AlreadyRegistered"


@dataclass(frozen=True)
class BookingError:
    """Failure value with a kind and a user-safe message.

    Returned inside a failed Result, never raised.
    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class InvariantViolation(Exception):
    """Raised when an internal invariant would break.

    This is the unrecoverable channel: it signals a bug or corrupted
    state, not a rejected request.
    """
    pass
