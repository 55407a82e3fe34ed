"""
Unit tests for the booking domain models.

These tests verify the entities on their own: construction rules, the
seat counter on a lesson, and grade promotion. No stores, no engine.

Testing philosophy:
- Test behavior, not implementation
- Each test should have a clear "given/when/then" structure
- Use descriptive names that explain what we're testing
- Prefer real objects over mocks where practical
"""

from datetime import date, time

import pytest

from swimschool.core.booking.errors import InvariantViolation
from swimschool.core.booking.models import (
    Booking,
    BookingStatus,
    Coach,
    DayOfWeek,
    Gender,
    Grade,
    Learner,
    Rating,
    SwimmingLesson,
)


def _lesson(capacity: int = 4, available_slots=None) -> SwimmingLesson:
    return SwimmingLesson(
        grade=Grade.GRADE_2,
        date=date(2025, 3, 17),
        time_slot=time(17, 0),
        coach_name="John",
        capacity=capacity,
        available_slots=available_slots,
    )


def _learner(**overrides) -> Learner:
    fields = dict(
        id="L1",
        name="John Doe",
        gender=Gender.MALE,
        age=6,
        emergency_contact="Emergency Contact 1",
        current_grade=Grade.GRADE_1,
    )
    fields.update(overrides)
    return Learner(**fields)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TestGrade:
    """Tests for the Grade ordinal."""

    def test_grades_are_ordered(self):
        """Grade 1 is below grade 5."""
        assert Grade.GRADE_1 < Grade.GRADE_3 < Grade.GRADE_5

    def test_from_value_accepts_one_to_five(self):
        assert Grade.from_value(4) is Grade.GRADE_4

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_from_value_rejects_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 1 and 5"):
            Grade.from_value(value)


class TestRating:

    def test_rating_values_match_satisfaction_scale(self):
        assert Rating.VERY_DISSATISFIED.value == 1
        assert Rating.OK.value == 3
        assert Rating.VERY_SATISFIED.value == 5

    def test_label_is_human_readable(self):
        assert Rating.VERY_SATISFIED.label == "VERY SATISFIED"

    def test_from_value_rejects_six(self):
        with pytest.raises(ValueError, match="between 1 and 5"):
            Rating.from_value(6)


class TestParsing:
    """Gender and day names come from typed text."""

    def test_gender_is_case_insensitive(self):
        assert Gender.from_string(" Female ") is Gender.FEMALE

    def test_unknown_gender_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown gender"):
            Gender.from_string("robot")

    def test_day_of_week_parses_names(self):
        assert DayOfWeek.from_string("saturday") is DayOfWeek.SATURDAY

    def test_day_of_week_of_date(self):
        """12 March 2025 was a Wednesday."""
        assert DayOfWeek.of(date(2025, 3, 12)) is DayOfWeek.WEDNESDAY


# ---------------------------------------------------------------------------
# SwimmingLesson
# ---------------------------------------------------------------------------

class TestSwimmingLesson:
    """Tests for the lesson seat counter."""

    def test_new_lesson_starts_with_every_seat_free(self):
        lesson = _lesson(capacity=4)
        assert lesson.available_slots == 4
        assert lesson.has_free_slot

    def test_reserve_and_release_move_the_counter(self):
        lesson = _lesson(capacity=4)

        lesson.reserve_slot()
        lesson.reserve_slot()
        lesson.release_slot()

        assert lesson.available_slots == 3

    def test_reserving_from_a_full_lesson_breaks_the_invariant(self):
        """A full lesson cannot go below zero seats."""
        lesson = _lesson(capacity=1, available_slots=0)

        with pytest.raises(InvariantViolation):
            lesson.reserve_slot()

    def test_releasing_past_capacity_breaks_the_invariant(self):
        lesson = _lesson(capacity=2)

        with pytest.raises(InvariantViolation):
            lesson.release_slot()

    def test_rejects_negative_capacity(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            _lesson(capacity=-1)

    def test_rejects_slots_above_capacity(self):
        with pytest.raises(ValueError, match="between 0 and capacity"):
            _lesson(capacity=2, available_slots=3)

    def test_day_comes_from_date(self):
        """17 March 2025 was a Monday."""
        assert _lesson().day is DayOfWeek.MONDAY


# ---------------------------------------------------------------------------
# Learner, Coach, Booking
# ---------------------------------------------------------------------------

class TestLearner:

    @pytest.mark.parametrize("age", [4, 11])
    def test_age_limits_are_inclusive(self, age):
        assert _learner(age=age).age == age

    @pytest.mark.parametrize("age", [3, 12])
    def test_age_outside_range_is_rejected(self, age):
        with pytest.raises(ValueError, match="between 4 and 11"):
            _learner(age=age)

    def test_name_is_required(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            _learner(name="  ")

    def test_promote_moves_grade_up(self):
        learner = _learner()
        learner.promote_to(Grade.GRADE_2)
        assert learner.current_grade is Grade.GRADE_2

    def test_grade_never_goes_down(self):
        learner = _learner(current_grade=Grade.GRADE_3)

        with pytest.raises(InvariantViolation):
            learner.promote_to(Grade.GRADE_2)

        assert learner.current_grade is Grade.GRADE_3


class TestCoach:

    def test_coach_requires_a_name(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            Coach(name="")


class TestBooking:

    def test_new_booking_is_booked_and_active(self):
        booking = Booking(
            booking_id="L11741780000000",
            booking_date=date(2025, 3, 12),
            learner_id="L1",
            lesson_id="S1",
        )
        assert booking.status is BookingStatus.BOOKED
        assert booking.is_active
        assert booking.review is None
        assert not booking.changed

    def test_cancelled_booking_is_not_active(self):
        booking = Booking(
            booking_id="B1L1",
            booking_date=date(2025, 3, 12),
            learner_id="L1",
            lesson_id="S1",
            status=BookingStatus.CANCELLED,
        )
        assert not booking.is_active
