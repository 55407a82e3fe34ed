"""
The school facade used by the console.

SwimmingSchool resolves IDs and date/time slots against the context's
stores, then hands the resolved entities to the rules engine. Callers only
ever pass validated primitives (dates, times, IDs, integers).
"""

import logging
from datetime import date, time
from typing import Optional, Union

from . import reports, rules
from .context import SchoolContext
from .models import (
    Booking,
    BookingStatus,
    Coach,
    DayOfWeek,
    Gender,
    Grade,
    Learner,
    SwimmingLesson,
)
from .result import Result


logger = logging.getLogger(__name__)


class SwimmingSchool:
    """
    One school: its timetable, learners, coaches and bookings.

    This is a service over a SchoolContext. It keeps no state of its own,
    so two schools built from two contexts never share anything.
    """

    def __init__(self, context: SchoolContext) -> None:
        self._context = context

    @property
    def context(self) -> SchoolContext:
        return self._context

    # -----------------------------------------------------------------------
    # Lookups
    # -----------------------------------------------------------------------

    def list_lessons(
        self,
        day: Optional[DayOfWeek] = None,
        grade: Optional[int] = None,
        coach_name: Optional[str] = None,
    ) -> list[SwimmingLesson]:
        """
        Future lessons matching every filter given.

        A grade of 0 and an empty coach name count as "no filter". Lessons
        come back in timetable order.
        """
        return self._context.timetable.query(
            after=self._context.today(),
            day=day,
            grade=grade or None,
            coach_name=coach_name or None,
        )

    def find_lesson(self, lesson_date: date, time_slot: time) -> Optional[SwimmingLesson]:
        return self._context.timetable.find_by_date_time(lesson_date, time_slot)

    def find_learner(self, learner_id: str) -> Optional[Learner]:
        return self._context.roster.get(learner_id)

    def find_booking(self, booking_id: str) -> Optional[Booking]:
        return self._context.ledger.get(booking_id)

    def lesson_for(self, booking: Booking) -> SwimmingLesson:
        return self._context.lesson_of(booking)

    def learner_for(self, booking: Booking) -> Learner:
        return self._context.learner_of(booking)

    def learners(self) -> list[Learner]:
        return self._context.roster.all()

    def coaches(self) -> list[Coach]:
        return self._context.coaches.all()

    def bookings(self, status: Optional[BookingStatus] = None) -> list[Booking]:
        """All bookings, or only those with `status`."""
        bookings = self._context.ledger.all()
        if status is None:
            return bookings
        return [booking for booking in bookings if booking.status == status]

    # -----------------------------------------------------------------------
    # Booking lifecycle
    # -----------------------------------------------------------------------

    def create_booking(
        self,
        lesson: Optional[SwimmingLesson],
        learner: Optional[Learner],
    ) -> Result[str]:
        return rules.create_booking(self._context, lesson, learner)

    def book_by_slot(self, lesson_date: date, time_slot: time, learner_id: str) -> Result[str]:
        """Book whichever lesson runs at `lesson_date` `time_slot`."""
        return self.create_booking(
            self.find_lesson(lesson_date, time_slot),
            self.find_learner(learner_id),
        )

    def change_booking(
        self,
        booking_id: str,
        new_lesson: Optional[SwimmingLesson],
    ) -> Result[str]:
        booking = self.find_booking(booking_id)
        learner = self._context.learner_of(booking) if booking else None
        return rules.change_booking(self._context, booking, learner, new_lesson)

    def change_booking_to_slot(
        self,
        booking_id: str,
        lesson_date: date,
        time_slot: time,
    ) -> Result[str]:
        return self.change_booking(booking_id, self.find_lesson(lesson_date, time_slot))

    def cancel_booking(self, booking_id: str) -> Result[str]:
        return rules.cancel_booking(self._context, self.find_booking(booking_id))

    def mark_attended(self, booking_id: str) -> Result[str]:
        return rules.mark_attended(self._context, self.find_booking(booking_id))

    def submit_review(
        self,
        booking_id: str,
        rating: int,
        comment: Optional[str] = None,
    ) -> Result[str]:
        """Review a booking on behalf of the learner who holds it."""
        booking = self.find_booking(booking_id)
        learner = self._context.learner_of(booking) if booking else None
        return rules.submit_review(self._context, learner, booking, rating, comment)

    # -----------------------------------------------------------------------
    # Roster
    # -----------------------------------------------------------------------

    def add_learner(
        self,
        name: str,
        gender: Union[Gender, str],
        age: int,
        emergency_contact: str,
        grade: Union[Grade, int],
    ) -> str:
        """
        Enrol a learner and return their new ID ("L<n>").

        Raises:
            ValueError: If gender, age or grade are out of range
        """
        if not isinstance(gender, Gender):
            gender = Gender.from_string(gender)

        learner = Learner(
            id=self._context.roster.next_id(),
            name=name,
            gender=gender,
            age=age,
            emergency_contact=emergency_contact,
            current_grade=Grade.from_value(int(grade)),
        )
        self._context.roster.add(learner)

        logger.info(
            "Learner added",
            extra={"learner_id": learner.id, "grade": learner.current_grade.value}
        )

        return learner.id

    # -----------------------------------------------------------------------
    # Reports
    # -----------------------------------------------------------------------

    def coach_ratings_report(self) -> list[reports.CoachRatingRow]:
        return reports.coach_ratings_report(self._context)

    def monthly_summary(
        self,
        month: int,
        year: Optional[int] = None,
    ) -> list[reports.MonthlySummaryRow]:
        return reports.monthly_summary(self._context, month, year)

    def detailed_report(
        self,
        month: int,
        year: Optional[int] = None,
    ) -> list[reports.BookingDetailRow]:
        return reports.detailed_report(self._context, month, year)
