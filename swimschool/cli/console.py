"""
Interactive console for the school.

The console owns all raw text handling: it prompts, re-asks until the
answer parses, and only then calls the school with dates, times, IDs and
integers. It never decides whether a booking is allowed; it prints what
the school answers.

Input and output are injectable so the whole menu can be driven from a
list of answers in tests.
"""

import logging
from datetime import date, time
from typing import Callable, Optional

from pydantic import ValidationError

from ..core.booking.models import (
    MAX_LEARNER_AGE,
    MIN_LEARNER_AGE,
    BookingStatus,
    DayOfWeek,
    Rating,
)
from ..core.booking.result import Result
from ..core.booking.school import SwimmingSchool
from . import formatting
from .requests import NewLearnerRequest


logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

WEEKDAY_SLOTS = (time(16, 0), time(17, 0), time(18, 0))
SATURDAY_SLOTS = (time(14, 0), time(15, 0))

MENU = """\
Select an option:
1. View Whole Timetable
2. View Timetable by Day
3. View Timetable by Grade Level
4. View Timetable by Coach's Name
5. Book a Lesson
6. Change Booking
7. Cancel Booking
8. Mark Your Booking as Attended
9. Generate Monthly Booking Report
10. Generate Average Rating Report for Coaches
11. View all Bookings
12. Add a new Learner
13. View all Learners
Select your option or 0 to exit:"""


def slots_for(lesson_date: date) -> tuple[time, ...]:
    """Time slots lessons run at on that date's weekday."""
    if DayOfWeek.of(lesson_date) == DayOfWeek.SATURDAY:
        return SATURDAY_SLOTS
    return WEEKDAY_SLOTS


class Console:
    """Numbered menu over a SwimmingSchool."""

    def __init__(
        self,
        school: SwimmingSchool,
        school_name: str = "HJSS",
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._school = school
        self._school_name = school_name
        self._input = input_fn
        self._output = output_fn
        self._actions: dict[int, Callable[[], None]] = {
            1: self.view_whole_timetable,
            2: self.view_timetable_by_day,
            3: self.view_timetable_by_grade,
            4: self.view_timetable_by_coach,
            5: self.book_lesson,
            6: self.change_booking,
            7: self.cancel_booking,
            8: self.attend_and_review,
            9: self.monthly_reports,
            10: self.coach_ratings,
            11: self.view_bookings,
            12: self.add_learner,
            13: self.view_learners,
        }

    def run(self) -> int:
        """Show the menu until the user picks 0 or input runs out."""
        try:
            while True:
                self._say("_" * 49)
                self._say(f"*** Welcome to {self._school_name} ***")
                option = self._ask_int(MENU)
                if option == 0:
                    self._say("Goodbye!")
                    return 0
                action = self._actions.get(option)
                if action is None:
                    self._say("Invalid option. Please try again.")
                    continue
                action()
        except EOFError:
            logger.info("Input closed, leaving console")
            return 0

    # -----------------------------------------------------------------------
    # Prompts
    # -----------------------------------------------------------------------

    def _say(self, text: str) -> None:
        self._output(text)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt + " ").strip()

    def _ask_int(
        self,
        prompt: str,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        while True:
            answer = self._ask(prompt)
            try:
                value = int(answer)
            except ValueError:
                self._say(f"'{answer}' is not a number. Please try again.")
                continue
            if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
                self._say(f"Please enter a number between {minimum} and {maximum}.")
                continue
            return value

    def _ask_text(self, prompt: str) -> str:
        while True:
            answer = self._ask(prompt)
            if answer:
                return answer
            self._say("A value is required.")

    def _ask_day(self) -> DayOfWeek:
        while True:
            answer = self._ask("Enter day (Monday, Wednesday, Friday, Saturday):")
            try:
                return DayOfWeek.from_string(answer)
            except ValueError:
                self._say(f"'{answer}' is not a day of the week.")

    def _ask_date(self) -> date:
        while True:
            answer = self._ask("Enter date (yyyy-MM-dd):")
            try:
                return date.fromisoformat(answer)
            except ValueError:
                self._say("Invalid date format. Please enter date in yyyy-MM-dd format.")

    def _ask_time(self, lesson_date: date) -> time:
        slots = slots_for(lesson_date)
        self._say("Available time slots:")
        for slot in slots:
            self._say(formatting.format_time_slot(slot))

        while True:
            answer = self._ask("Enter time (HH:mm):")
            try:
                chosen = time.fromisoformat(answer)
            except ValueError:
                self._say("Invalid time format. Please enter time in HH:mm format.")
                continue
            if chosen in slots:
                return chosen
            self._say("Invalid time slot. Please enter a valid time slot.")

    def _ask_booking_id(self, prompt: str) -> str:
        while True:
            booking_id = self._ask_text(prompt)
            if self._school.find_booking(booking_id) is not None:
                return booking_id
            self._say("Invalid Booking ID! Please try again.")

    def _show_result(self, result: Result) -> None:
        self._say(result.message or "")

    def _offer_timetable(self) -> None:
        option = self._ask_int(
            "In case you want to view the timetable, select an option from below "
            "or enter 0 to proceed:\n"
            "1. View timetable by day\n"
            "2. View timetable by grade level\n"
            "3. View timetable by coach's name"
        )
        if option == 1:
            self.view_timetable_by_day()
        elif option == 2:
            self.view_timetable_by_grade()
        elif option == 3:
            self.view_timetable_by_coach()
        elif option != 0:
            self._say("Invalid option, continuing.")

    # -----------------------------------------------------------------------
    # Timetable
    # -----------------------------------------------------------------------

    def view_whole_timetable(self) -> None:
        self._say(formatting.timetable_table(self._school.list_lessons()))

    def view_timetable_by_day(self) -> None:
        day = self._ask_day()
        self._say(formatting.timetable_table(self._school.list_lessons(day=day)))

    def view_timetable_by_grade(self) -> None:
        grade = self._ask_int("Enter grade level (1, 2, 3, 4, 5):", 1, 5)
        self._say(formatting.timetable_table(self._school.list_lessons(grade=grade)))

    def view_timetable_by_coach(self) -> None:
        coach_name = self._ask_text("Enter coach's name:")
        self._say(formatting.timetable_table(self._school.list_lessons(coach_name=coach_name)))

    # -----------------------------------------------------------------------
    # Bookings
    # -----------------------------------------------------------------------

    def book_lesson(self) -> None:
        self._say("----------- Booking Swimming Lesson -----------")
        self.view_learners()
        self._offer_timetable()

        learner_id = self._ask_text("Now enter learner ID to proceed with the booking:")
        lesson_date = self._ask_date()
        time_slot = self._ask_time(lesson_date)

        self._show_result(self._school.book_by_slot(lesson_date, time_slot, learner_id))

    def change_booking(self) -> None:
        self._say("----------- Changing Lesson Booking -----------")
        self._show_booked()

        booking_id = self._ask_booking_id("Enter booking ID to change:")
        learner = self._school.learner_for(self._school.find_booking(booking_id))
        self._say(f"You are changing booking details of: {learner.name} for booking ID: {booking_id}")

        self._offer_timetable()
        lesson_date = self._ask_date()
        time_slot = self._ask_time(lesson_date)

        self._show_result(self._school.change_booking_to_slot(booking_id, lesson_date, time_slot))

    def cancel_booking(self) -> None:
        self._show_booked()
        booking_id = self._ask_text("Enter booking ID to cancel:")
        self._show_result(self._school.cancel_booking(booking_id))

    def attend_and_review(self) -> None:
        self._show_booked()
        booking_id = self._ask_text("Enter booking Id:")

        attended = self._school.mark_attended(booking_id)
        self._show_result(attended)
        if attended.is_failure:
            return

        self._say("Now please provide your rating for this booking:")
        for rating in Rating:
            self._say(f"Enter {rating.value} for {rating.label}")
        rating = self._ask_int("Enter rating (1 to 5):")
        comment = self._ask("Add a comment (leave empty to skip):") or None

        self._show_result(self._school.submit_review(booking_id, rating, comment))

    def view_bookings(self) -> None:
        self._say("All Bookings:")
        self._say(formatting.bookings_table(self._school, self._school.bookings()))

    def _show_booked(self) -> None:
        self._say("Available Bookings:")
        self._say(formatting.bookings_table(
            self._school, self._school.bookings(BookingStatus.BOOKED)
        ))

    # -----------------------------------------------------------------------
    # Reports
    # -----------------------------------------------------------------------

    def monthly_reports(self) -> None:
        report_type = self._ask_int(
            "Select the type of report:\n"
            "1. Summary of bookings\n"
            "2. Detailed information for each booking",
            1,
            2,
        )
        month = self._ask_int("Enter month number (1-12) for the report:", 1, 12)

        if report_type == 1:
            self._say("------------ Summary of Monthly Learners Bookings ------------")
            self._say(formatting.monthly_summary_table(self._school.monthly_summary(month)))
        else:
            self._say("------------ Detailed Monthly Learner Information Report ------------")
            self._say(formatting.detailed_report_table(self._school.detailed_report(month)))

    def coach_ratings(self) -> None:
        self._say("------------ Coach Ratings Report ------------")
        self._say(formatting.coach_ratings_table(self._school.coach_ratings_report()))

    # -----------------------------------------------------------------------
    # Learners
    # -----------------------------------------------------------------------

    def add_learner(self) -> None:
        prompts = {
            "name": "Enter learner name:",
            "gender": "Enter learner gender (male/female):",
            "age": f"Enter learner age between ({MIN_LEARNER_AGE} to {MAX_LEARNER_AGE}):",
            "emergency_contact": "Enter emergency contact:",
            "grade": "Enter learner grade (1-5):",
        }
        answers: dict[str, str] = {}
        pending = list(prompts)

        # Re-ask only the fields that failed validation
        while True:
            for field_name in pending:
                answers[field_name] = self._ask(prompts[field_name])
            try:
                request = NewLearnerRequest(**answers)
                break
            except ValidationError as e:
                pending = []
                for error in e.errors():
                    field_name = str(error["loc"][0])
                    self._say(f"Invalid {field_name.replace('_', ' ')}: {error['msg']}")
                    if field_name not in pending:
                        pending.append(field_name)

        learner_id = self._school.add_learner(**request.model_dump())
        self._say(f"New learner with ID {learner_id} and name {request.name} has been added.")

    def view_learners(self) -> None:
        self._say("Learners in the system:")
        self._say(formatting.learners_table(self._school.learners()))
