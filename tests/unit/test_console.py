"""
Tests for the interactive console.

The console is driven by a scripted list of answers; output is collected
into a list and searched as one block of text.
"""

import io

import pytest

from swimschool.cli.console import Console, slots_for
from swimschool.config.settings import Settings, get_settings
from swimschool.main import create_school, main

from conftest import TODAY


def run_console(school, *answers):
    """Feed `answers` to a console and return everything it printed."""
    remaining = iter(answers)
    printed = []

    def fake_input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    exit_code = Console(school, input_fn=fake_input, output_fn=printed.append).run()
    assert exit_code == 0
    return "\n".join(printed)


# ---------------------------------------------------------------------------
# Menu loop
# ---------------------------------------------------------------------------

class TestMenu:

    def test_zero_exits(self, seeded_school):
        assert "Goodbye!" in run_console(seeded_school, "0")

    def test_end_of_input_exits_quietly(self, seeded_school):
        assert "Goodbye!" not in run_console(seeded_school)

    def test_unknown_option(self, seeded_school):
        output = run_console(seeded_school, "42", "0")
        assert "Invalid option. Please try again." in output

    def test_non_numeric_option(self, seeded_school):
        output = run_console(seeded_school, "abc", "0")
        assert "'abc' is not a number" in output

    def test_saturday_has_afternoon_slots(self):
        assert len(slots_for(TODAY)) == 3
        assert [slot.hour for slot in slots_for(TODAY.replace(day=15))] == [14, 15]


# ---------------------------------------------------------------------------
# Timetable and reports
# ---------------------------------------------------------------------------

class TestViews:

    def test_timetable_by_day_reasks_unknown_day(self, seeded_school):
        output = run_console(seeded_school, "2", "Funday", "Saturday", "0")

        assert "'Funday' is not a day of the week." in output
        assert "SATURDAY" in output
        assert "MONDAY" not in output

    def test_timetable_by_grade_rejects_out_of_range(self, seeded_school):
        output = run_console(seeded_school, "3", "9", "5", "0")
        assert "Please enter a number between 1 and 5." in output
        assert "GRADE_5" in output

    def test_coach_ratings(self, seeded_school):
        output = run_console(seeded_school, "10", "0")
        assert "Shivani" in output
        assert "4.00" in output

    def test_monthly_summary(self, seeded_school):
        output = run_console(seeded_school, "9", "1", "3", "0")
        assert "Summary of Monthly Learners Bookings" in output
        assert "Christopher Hall" in output

    def test_detailed_report_for_empty_month(self, seeded_school):
        output = run_console(seeded_school, "9", "2", "7", "0")
        assert "No bookings for this month." in output


# ---------------------------------------------------------------------------
# Booking flows
# ---------------------------------------------------------------------------

class TestBookingFlows:

    def test_book_a_lesson(self, seeded_school):
        output = run_console(seeded_school, "5", "0", "L6", "2025-03-17", "16:00", "0")
        assert "You have successfully registered the lesson GRADE_1 on 2025-03-17" in output

    def test_booking_reasks_date_and_time(self, seeded_school):
        output = run_console(
            seeded_school,
            "5", "0", "L6", "17/03/2025", "2025-03-15", "16:00", "14:00", "0",
        )

        assert "Invalid date format" in output
        assert "Invalid time slot" in output
        assert "too advanced" in output

    def test_change_of_past_booking_is_refused(self, seeded_school):
        output = run_console(
            seeded_school,
            "6", "nope", "B5L5", "0", "2025-03-19", "18:00", "0",
        )

        assert "Invalid Booking ID! Please try again." in output
        assert "You are changing booking details of: Sarah Brown" in output
        assert "Change not allowed" in output

    def test_cancel_of_past_lesson_is_refused(self, seeded_school):
        output = run_console(seeded_school, "7", "B4L4", "0")
        assert "Cancel rejected" in output

    def test_attend_then_review(self, seeded_school):
        output = run_console(seeded_school, "8", "B4L4", "5", "", "0")

        assert "Learner - L4 has attended the Lesson GRADE_1" in output
        assert "Learner L4 has rated 5 for lesson GRADE_1" in output

    def test_review_with_bad_rating(self, seeded_school):
        output = run_console(seeded_school, "8", "B4L4", "6", "", "0")
        assert "Rating can only be between 1 and 5." in output

    def test_attending_future_booking_skips_review(self, seeded_school):
        booking_id = seeded_school.book_by_slot(
            TODAY.replace(day=17), slots_for(TODAY)[0], "L6"
        ).value

        output = run_console(seeded_school, "8", booking_id, "0")

        assert "has not started yet" in output
        assert "provide your rating" not in output


# ---------------------------------------------------------------------------
# Learners
# ---------------------------------------------------------------------------

class TestAddLearner:

    def test_only_invalid_fields_are_asked_again(self, seeded_school):
        output = run_console(
            seeded_school,
            "12", "Tom", "robot", "12", "Mum", "2",
            "male", "9",
            "0",
        )

        assert "Invalid gender" in output
        assert "Invalid age" in output
        assert "New learner with ID L16 and name Tom has been added." in output
        assert seeded_school.find_learner("L16").age == 9

    def test_view_learners(self, seeded_school):
        output = run_console(seeded_school, "13", "0")
        assert "L15" in output


# ---------------------------------------------------------------------------
# Application entry point
# ---------------------------------------------------------------------------

class TestMain:

    @pytest.fixture(autouse=True)
    def fresh_settings(self):
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_create_school_without_seed_is_empty(self):
        school = create_school(Settings(_env_file=None, seed_demo_data=False))
        assert school.learners() == []
        assert school.list_lessons() == []

    def test_create_school_uses_clock(self):
        school = create_school(Settings(_env_file=None), clock=lambda: TODAY)
        assert len(school.learners()) == 15
        assert all(lesson.date > TODAY for lesson in school.list_lessons())

    def test_main_runs_until_exit(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))

        assert main(["--no-seed"]) == 0
        assert "Goodbye!" in capsys.readouterr().out

    def test_main_refuses_bad_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("LESSON_CAPACITY", "0")

        assert main([]) == 1
        assert "LESSON_CAPACITY must be at least 1" in capsys.readouterr().err
