"""
School context: the state every engine operation works against.

There is no global school. Whoever starts the application builds one
SchoolContext and passes it to the rules and reports explicitly, which
is also how tests get an isolated school with a pinned clock.
"""

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from .errors import InvariantViolation
from .models import Booking, Learner, SwimmingLesson
from .stores import BookingLedger, CoachDirectory, LearnerRoster, TimetableStore


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class BookingIdGenerator:
    """
    Builds booking IDs as learner ID + epoch milliseconds.

    The millisecond suffix is forced to increase on every call, so two
    bookings made within the same millisecond still get distinct IDs.
    """

    def __init__(self, millis: Callable[[], int] = _epoch_millis) -> None:
        self._millis = millis
        self._last = 0

    def __call__(self, learner_id: str) -> str:
        suffix = max(self._millis(), self._last + 1)
        self._last = suffix
        return f"{learner_id}{suffix}"


@dataclass
class SchoolContext:
    """Stores, clock and ID source for one school."""
    timetable: TimetableStore
    ledger: BookingLedger
    roster: LearnerRoster
    coaches: CoachDirectory
    clock: Callable[[], date] = date.today
    booking_ids: BookingIdGenerator = field(default_factory=BookingIdGenerator)

    def today(self) -> date:
        return self.clock()

    def new_booking_id(self, learner_id: str) -> str:
        booking_id = self.booking_ids(learner_id)
        while booking_id in self.ledger:
            booking_id = self.booking_ids(learner_id)
        return booking_id

    def lesson_of(self, booking: Booking) -> SwimmingLesson:
        lesson = self.timetable.get(booking.lesson_id)
        if lesson is None:
            raise InvariantViolation(
                f"Booking {booking.booking_id} points at unknown lesson {booking.lesson_id}"
            )
        return lesson

    def learner_of(self, booking: Booking) -> Learner:
        learner = self.roster.get(booking.learner_id)
        if learner is None:
            raise InvariantViolation(
                f"Booking {booking.booking_id} points at unknown learner {booking.learner_id}"
            )
        return learner

    def bookings_of(self, learner: Learner) -> list[Booking]:
        """The learner's bookings, oldest first."""
        bookings = []
        for booking_id in learner.booking_ids:
            booking: Optional[Booking] = self.ledger.get(booking_id)
            if booking is None:
                raise InvariantViolation(
                    f"Learner {learner.id} lists unknown booking {booking_id}"
                )
            bookings.append(booking)
        return bookings
