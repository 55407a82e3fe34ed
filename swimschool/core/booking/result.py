"""
Result type for booking operations.

Every engine call returns either a success payload or a BookingError.
Rejected bookings are ordinary outcomes at a swimming school (full
lessons, grade too high), so they travel as values instead of exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from .errors import BookingError, ErrorKind


T = TypeVar("T")
U = TypeVar("U")


class ResultStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an engine operation.

    Attributes:
        status: SUCCESS or FAILURE
        value: Payload when successful (booking ID, confirmation text...)
        error: The BookingError when the operation was rejected
        message: Human-readable text for either outcome

    Examples:
        >>> result = Result.success("L1171", "Booked")
        >>> result.is_success
        True
        >>> failed = Result.failure(ErrorKind.INVALID_RATING, "Rating can only be between 1 and 5.")
        >>> failed.kind
        <ErrorKind.INVALID_RATING: 'InvalidRating'>
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[BookingError] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == ResultStatus.FAILURE

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind of a failure, None for a success."""
        return self.error.kind if self.error else None

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> "Result[T]":
        return cls(status=ResultStatus.SUCCESS, value=value, message=message)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(
            status=ResultStatus.FAILURE,
            error=BookingError(kind=kind, message=message),
            message=message,
        )

    def unwrap(self) -> T:
        """
        Return the success value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot unwrap failure result: {self.message}")
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_success else default

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Apply func to a success value; failures pass through untouched."""
        if self.is_failure:
            return Result(status=ResultStatus.FAILURE, error=self.error, message=self.message)
        return Result.success(func(self.value), self.message)
