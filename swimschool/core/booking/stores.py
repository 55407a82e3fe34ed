"""
Store interfaces used by the booking engine.

Using Protocols here means the engine doesn't know or care how lessons,
bookings and learners are held. The in-memory implementations live in
infrastructure/memory; tests can hand in anything with the same shape.
"""

from datetime import date, time
from typing import Optional, Protocol

from .models import Booking, Coach, DayOfWeek, Learner, SwimmingLesson


class TimetableStore(Protocol):
    """Ordered collection of lessons, kept in insertion order."""

    def add(self, lesson: SwimmingLesson) -> SwimmingLesson:
        """Store a lesson, assigning its ID, and return it."""
        ...

    def get(self, lesson_id: str) -> Optional[SwimmingLesson]:
        ...

    def all(self) -> list[SwimmingLesson]:
        ...

    def find_by_date_time(self, lesson_date: date, time_slot: time) -> Optional[SwimmingLesson]:
        """Exact match on date and time of day."""
        ...

    def query(
        self,
        after: date,
        day: Optional[DayOfWeek] = None,
        grade: Optional[int] = None,
        coach_name: Optional[str] = None,
    ) -> list[SwimmingLesson]:
        """Lessons strictly after `after` that match every given filter."""
        ...


class BookingLedger(Protocol):
    """Booking ID -> Booking. The single source of truth for booking state."""

    def add(self, booking: Booking) -> None:
        ...

    def get(self, booking_id: str) -> Optional[Booking]:
        ...

    def all(self) -> list[Booking]:
        ...

    def __contains__(self, booking_id: object) -> bool:
        ...


class LearnerRoster(Protocol):

    def add(self, learner: Learner) -> None:
        ...

    def get(self, learner_id: str) -> Optional[Learner]:
        ...

    def all(self) -> list[Learner]:
        ...

    def next_id(self) -> str:
        """The ID the next added learner should get."""
        ...


class CoachDirectory(Protocol):

    def add(self, coach: Coach) -> None:
        ...

    def get(self, name: str) -> Optional[Coach]:
        ...

    def all(self) -> list[Coach]:
        ...
