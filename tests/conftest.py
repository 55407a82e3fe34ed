"""Pytest configuration and shared fixtures.

Every school built here runs on a pinned clock, so rules that compare
against "today" behave the same on any day the suite runs.
"""

from datetime import date, time, timedelta

import pytest

from swimschool.core.booking import (
    Coach,
    Gender,
    Grade,
    Learner,
    SchoolContext,
    SwimmingLesson,
    SwimmingSchool,
)
from swimschool.infrastructure.memory import create_memory_context
from swimschool.infrastructure.seed import seed_school


# A Wednesday
TODAY = date(2025, 3, 12)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def context() -> SchoolContext:
    """Empty school context with the clock pinned to TODAY."""
    return create_memory_context(clock=lambda: TODAY)


@pytest.fixture
def school(context: SchoolContext) -> SwimmingSchool:
    return SwimmingSchool(context)


@pytest.fixture
def make_lesson(context: SchoolContext):
    """Factory adding a lesson to the timetable (default: next Monday 16:00)."""

    def _make(
        grade: Grade = Grade.GRADE_1,
        lesson_date: date = TODAY + timedelta(days=5),
        hour: int = 16,
        coach_name: str = "Helen",
        capacity: int = 4,
        available_slots: int | None = None,
    ) -> SwimmingLesson:
        if context.coaches.get(coach_name) is None:
            context.coaches.add(Coach(name=coach_name))
        lesson = context.timetable.add(SwimmingLesson(
            grade=grade,
            date=lesson_date,
            time_slot=time(hour, 0),
            coach_name=coach_name,
            capacity=capacity,
            available_slots=available_slots,
        ))
        context.coaches.get(coach_name).lesson_ids.append(lesson.id)
        return lesson

    return _make


@pytest.fixture
def make_learner(context: SchoolContext):
    """Factory enrolling a learner at the given grade."""

    def _make(grade: Grade = Grade.GRADE_1, name: str = "Test Learner") -> Learner:
        learner = Learner(
            id=context.roster.next_id(),
            name=name,
            gender=Gender.FEMALE,
            age=7,
            emergency_contact="07000 000000",
            current_grade=grade,
        )
        context.roster.add(learner)
        return learner

    return _make


@pytest.fixture
def seeded_school() -> SwimmingSchool:
    """School filled with the demo timetable, learners and bookings."""
    seeded = create_memory_context(clock=lambda: TODAY)
    seed_school(seeded, weeks=4, capacity=4)
    return SwimmingSchool(seeded)
