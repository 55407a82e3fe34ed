"""
Read-only reports over the ledger and timetable.

Nothing here mutates state. Rows are plain values the console turns into
tables.
"""

import calendar
from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from .context import SchoolContext
from .models import BookingStatus


@dataclass(frozen=True)
class CoachRatingRow:
    coach_name: str
    average_rating: float
    review_count: int


@dataclass(frozen=True)
class MonthlySummaryRow:
    """Per-learner booking counts for one month."""
    learner_id: str
    learner_name: str
    current_grade: str
    booked: int
    changed: int
    cancelled: int
    attended: int


@dataclass(frozen=True)
class BookingDetailRow:
    learner_id: str
    booking_id: str
    grade: str
    lesson_date: date
    time_slot: time
    coach_name: str
    status: str
    review: str  # rating name, or "-" when not reviewed


def month_window(month: int, year: int) -> tuple[date, date]:
    """
    First and last day of a month.

    Raises:
        ValueError: If month is not 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def coach_ratings_report(school: SchoolContext) -> list[CoachRatingRow]:
    """
    Average rating per coach across every review of every lesson they teach.

    Coaches without reviews report 0.
    """
    ratings: dict[str, list[int]] = {coach.name: [] for coach in school.coaches.all()}

    for lesson in school.timetable.all():
        if lesson.coach_name not in ratings:
            continue
        ratings[lesson.coach_name].extend(review.rating.value for review in lesson.reviews)

    rows = []
    for coach_name, values in ratings.items():
        average = sum(values) / len(values) if values else 0.0
        rows.append(CoachRatingRow(coach_name=coach_name, average_rating=average, review_count=len(values)))
    return rows


def monthly_summary(
    school: SchoolContext,
    month: int,
    year: Optional[int] = None,
) -> list[MonthlySummaryRow]:
    """
    Count each learner's bookings by status for lessons in the month.

    The window is [first day, last day): the last day of the month is
    not counted.
    """
    start, end = month_window(month, year or school.today().year)
    rows = []

    for learner in school.roster.all():
        counts = {status: 0 for status in BookingStatus}
        changed = 0

        for booking in school.bookings_of(learner):
            lesson_date = school.lesson_of(booking).date
            if not start <= lesson_date < end:
                continue
            counts[booking.status] += 1
            if booking.changed:
                changed += 1

        rows.append(MonthlySummaryRow(
            learner_id=learner.id,
            learner_name=learner.name,
            current_grade=learner.current_grade.name,
            booked=counts[BookingStatus.BOOKED],
            changed=changed,
            cancelled=counts[BookingStatus.CANCELLED],
            attended=counts[BookingStatus.ATTENDED],
        ))

    return rows


def detailed_report(
    school: SchoolContext,
    month: int,
    year: Optional[int] = None,
) -> list[BookingDetailRow]:
    """One row per booking whose lesson falls in the month, learner by learner."""
    start, end = month_window(month, year or school.today().year)
    rows = []

    for learner in school.roster.all():
        for booking in school.bookings_of(learner):
            lesson = school.lesson_of(booking)
            # the first day is included, the last day is not
            if not (lesson.date == start or start < lesson.date < end):
                continue
            rows.append(BookingDetailRow(
                learner_id=learner.id,
                booking_id=booking.booking_id,
                grade=lesson.grade.name,
                lesson_date=lesson.date,
                time_slot=lesson.time_slot,
                coach_name=lesson.coach_name,
                status=booking.status.value,
                review=booking.review.rating.name if booking.review else "-",
            ))

    return rows
