"""
In-memory stores for the school.

The school keeps everything for the lifetime of the process and nothing
after it. Each store is a small wrapper around a list or dict that gives
the engine lookup by ID, the way the engine's store Protocols describe.
"""

import logging
from datetime import date, time
from typing import Callable, Optional

from ...core.booking.context import SchoolContext
from ...core.booking.models import Booking, Coach, DayOfWeek, Learner, SwimmingLesson


logger = logging.getLogger(__name__)


class InMemoryTimetable:
    """
    Lessons in insertion order.

    Lessons get IDs "S1", "S2", ... as they are added. Queries keep
    insertion order; nothing is sorted by date.
    """

    def __init__(self) -> None:
        self._lessons: dict[str, SwimmingLesson] = {}

    def add(self, lesson: SwimmingLesson) -> SwimmingLesson:
        lesson.id = f"S{len(self._lessons) + 1}"
        self._lessons[lesson.id] = lesson
        return lesson

    def get(self, lesson_id: str) -> Optional[SwimmingLesson]:
        return self._lessons.get(lesson_id)

    def all(self) -> list[SwimmingLesson]:
        return list(self._lessons.values())

    def find_by_date_time(self, lesson_date: date, time_slot: time) -> Optional[SwimmingLesson]:
        for lesson in self._lessons.values():
            if lesson.date == lesson_date and lesson.time_slot == time_slot:
                return lesson
        return None

    def query(
        self,
        after: date,
        day: Optional[DayOfWeek] = None,
        grade: Optional[int] = None,
        coach_name: Optional[str] = None,
    ) -> list[SwimmingLesson]:
        matches = []
        for lesson in self._lessons.values():
            if lesson.date <= after:
                continue
            if day is not None and lesson.day != day:
                continue
            if grade is not None and lesson.grade != grade:
                continue
            if coach_name is not None and lesson.coach_name != coach_name:
                continue
            matches.append(lesson)

        logger.debug(
            "Timetable queried",
            extra={
                "day": day.name if day is not None else None,
                "grade": grade,
                "coach_name": coach_name,
                "matches": len(matches),
            }
        )

        return matches

    def __len__(self) -> int:
        return len(self._lessons)


class InMemoryBookingLedger:
    """Bookings keyed by booking ID, in creation order."""

    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def add(self, booking: Booking) -> None:
        if booking.booking_id in self._bookings:
            raise ValueError(f"Booking {booking.booking_id} already exists")
        self._bookings[booking.booking_id] = booking

    def get(self, booking_id: str) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def all(self) -> list[Booking]:
        return list(self._bookings.values())

    def __contains__(self, booking_id: object) -> bool:
        return booking_id in self._bookings

    def __len__(self) -> int:
        return len(self._bookings)


class InMemoryLearnerRoster:
    """Learners keyed by ID. Learners are never removed."""

    def __init__(self) -> None:
        self._learners: dict[str, Learner] = {}

    def add(self, learner: Learner) -> None:
        if learner.id in self._learners:
            raise ValueError(f"Learner {learner.id} already exists")
        self._learners[learner.id] = learner

    def get(self, learner_id: str) -> Optional[Learner]:
        return self._learners.get(learner_id)

    def all(self) -> list[Learner]:
        return list(self._learners.values())

    def next_id(self) -> str:
        return f"L{len(self._learners) + 1}"

    def __len__(self) -> int:
        return len(self._learners)


class InMemoryCoachDirectory:

    def __init__(self) -> None:
        self._coaches: dict[str, Coach] = {}

    def add(self, coach: Coach) -> None:
        self._coaches[coach.name] = coach

    def get(self, name: str) -> Optional[Coach]:
        return self._coaches.get(name)

    def all(self) -> list[Coach]:
        return list(self._coaches.values())


def create_memory_context(clock: Optional[Callable[[], date]] = None) -> SchoolContext:
    """Empty school context backed by the in-memory stores."""
    context = SchoolContext(
        timetable=InMemoryTimetable(),
        ledger=InMemoryBookingLedger(),
        roster=InMemoryLearnerRoster(),
        coaches=InMemoryCoachDirectory(),
    )
    if clock is not None:
        context.clock = clock

    logger.info("Initialized in-memory school stores")

    return context
