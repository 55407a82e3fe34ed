"""
Demo data for a freshly started school.

Builds a timetable around "today": one week of lessons that already took
place (so attendance and reviews have something to work on) followed by
`weeks` weeks of upcoming lessons. Learners, a handful of bookings and
reviews of the past lessons are added on top.

Fixture data is written straight into the stores. It is not a sequence
of user actions, so it doesn't go through the rules engine.
"""

import logging
from datetime import date, time, timedelta

from ..core.booking.context import SchoolContext
from ..core.booking.models import (
    Booking,
    BookingStatus,
    Coach,
    DayOfWeek,
    Gender,
    Grade,
    Learner,
    Rating,
    Review,
    SwimmingLesson,
)


logger = logging.getLogger(__name__)

COACH_NAMES = ("Shivani", "John", "Helen", "Alice")

# (day, grade, hour, coach) for the week before today
PAST_WEEK = (
    (DayOfWeek.MONDAY, Grade.GRADE_1, 16, "Shivani"),
    (DayOfWeek.MONDAY, Grade.GRADE_2, 17, "John"),
    (DayOfWeek.MONDAY, Grade.GRADE_3, 18, "Helen"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_1, 16, "Shivani"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_2, 17, "John"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_3, 18, "Helen"),
    (DayOfWeek.FRIDAY, Grade.GRADE_1, 16, "Shivani"),
    (DayOfWeek.FRIDAY, Grade.GRADE_2, 17, "John"),
    (DayOfWeek.FRIDAY, Grade.GRADE_3, 18, "Helen"),
    (DayOfWeek.SATURDAY, Grade.GRADE_1, 14, "Shivani"),
    (DayOfWeek.SATURDAY, Grade.GRADE_2, 15, "John"),
)

# (day, grade, hour, coach) repeated for every upcoming week
WEEKLY = (
    (DayOfWeek.MONDAY, Grade.GRADE_1, 16, "Shivani"),
    (DayOfWeek.MONDAY, Grade.GRADE_2, 17, "John"),
    (DayOfWeek.MONDAY, Grade.GRADE_3, 18, "Helen"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_4, 16, "Helen"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_5, 17, "Shivani"),
    (DayOfWeek.WEDNESDAY, Grade.GRADE_1, 18, "John"),
    (DayOfWeek.FRIDAY, Grade.GRADE_2, 16, "Alice"),
    (DayOfWeek.FRIDAY, Grade.GRADE_3, 17, "Helen"),
    (DayOfWeek.FRIDAY, Grade.GRADE_4, 18, "Alice"),
    (DayOfWeek.SATURDAY, Grade.GRADE_5, 14, "John"),
    (DayOfWeek.SATURDAY, Grade.GRADE_1, 15, "Alice"),
)

# (name, gender, age, grade)
LEARNERS = (
    ("John Doe", Gender.MALE, 4, Grade.GRADE_1),
    ("Jane Smith", Gender.MALE, 5, Grade.GRADE_1),
    ("Emily Johnson", Gender.FEMALE, 6, Grade.GRADE_2),
    ("Michael Williams", Gender.MALE, 7, Grade.GRADE_4),
    ("Sarah Brown", Gender.FEMALE, 8, Grade.GRADE_5),
    ("David Jones", Gender.MALE, 9, Grade.GRADE_1),
    ("Jessica Davis", Gender.FEMALE, 10, Grade.GRADE_1),
    ("Daniel Miller", Gender.MALE, 11, Grade.GRADE_1),
    ("Amanda Wilson", Gender.FEMALE, 10, Grade.GRADE_1),
    ("James Taylor", Gender.MALE, 9, Grade.GRADE_1),
    ("Ashley Anderson", Gender.MALE, 8, Grade.GRADE_1),
    ("Robert Martinez", Gender.MALE, 7, Grade.GRADE_1),
    ("Jennifer Lee", Gender.FEMALE, 6, Grade.GRADE_1),
    ("William Clark", Gender.MALE, 5, Grade.GRADE_1),
    ("Christopher Hall", Gender.FEMALE, 4, Grade.GRADE_1),
)

# Bookings "B<n>L<n>" on the first five lessons for learners L1..L5
SEEDED_BOOKINGS = 5

# booking ID -> (rating, comment) for bookings already attended
SEEDED_REVIEWS = {
    "B1L1": (Rating.SATISFIED, "Great lesson!"),
    "B2L2": (Rating.VERY_SATISFIED, "Fantastic coaching!"),
    "B3L3": (Rating.OK, "Enjoyed the session!"),
}


def previous_weekday(today: date, day: DayOfWeek) -> date:
    """Most recent `day` strictly before `today`."""
    delta = (today.weekday() - day) % 7 or 7
    return today - timedelta(days=delta)


def next_weekday(start: date, day: DayOfWeek) -> date:
    """First `day` strictly after `start`."""
    delta = (day - start.weekday()) % 7 or 7
    return start + timedelta(days=delta)


def _add_lesson(
    school: SchoolContext,
    grade: Grade,
    lesson_date: date,
    hour: int,
    coach_name: str,
    capacity: int,
) -> SwimmingLesson:
    lesson = school.timetable.add(SwimmingLesson(
        grade=grade,
        date=lesson_date,
        time_slot=time(hour, 0),
        coach_name=coach_name,
        capacity=capacity,
    ))
    school.coaches.get(coach_name).lesson_ids.append(lesson.id)
    return lesson


def seed_timetable(school: SchoolContext, weeks: int, capacity: int) -> None:
    today = school.today()

    for name in COACH_NAMES:
        school.coaches.add(Coach(name=name))

    for day, grade, hour, coach_name in PAST_WEEK:
        _add_lesson(school, grade, previous_weekday(today, day), hour, coach_name, capacity)

    for week in range(weeks):
        start = today + timedelta(weeks=week)
        for day, grade, hour, coach_name in WEEKLY:
            _add_lesson(school, grade, next_weekday(start, day), hour, coach_name, capacity)


def seed_learners(school: SchoolContext) -> None:
    for name, gender, age, grade in LEARNERS:
        school.roster.add(Learner(
            id=school.roster.next_id(),
            name=name,
            gender=gender,
            age=age,
            emergency_contact=f"Emergency Contact {school.roster.next_id()[1:]}",
            current_grade=grade,
        ))


def seed_bookings(school: SchoolContext) -> None:
    lessons = school.timetable.all()[:SEEDED_BOOKINGS]

    for number, lesson in enumerate(lessons, start=1):
        learner = school.roster.get(f"L{number}")
        booking = Booking(
            booking_id=f"B{number}L{number}",
            booking_date=school.today(),
            learner_id=learner.id,
            lesson_id=lesson.id,
        )
        learner.booking_ids.append(booking.booking_id)
        school.ledger.add(booking)
        lesson.reserve_slot()


def seed_reviews(school: SchoolContext) -> None:
    for booking_id, (rating, comment) in SEEDED_REVIEWS.items():
        booking = school.ledger.get(booking_id)
        lesson = school.lesson_of(booking)

        booking.status = BookingStatus.ATTENDED
        lesson.release_slot()

        review = Review(
            rating=rating,
            learner_id=booking.learner_id,
            grade_value=lesson.grade.value,
            lesson_date=lesson.date,
            review_date=school.today(),
            comment=comment,
        )
        lesson.add_review(review)
        booking.review = review


def seed_school(school: SchoolContext, weeks: int = 4, capacity: int = 4) -> None:
    """Fill an empty school with the demo timetable, learners and bookings."""
    seed_timetable(school, weeks, capacity)
    seed_learners(school)
    seed_bookings(school)
    seed_reviews(school)

    logger.info(
        "Seeded demo data",
        extra={
            "lessons": len(school.timetable.all()),
            "learners": len(school.roster.all()),
            "bookings": len(school.ledger.all()),
        }
    )
