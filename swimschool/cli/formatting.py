"""Fixed-width text tables for the console."""

from datetime import time
from typing import Sequence

from ..core.booking.models import Booking, Learner, SwimmingLesson
from ..core.booking.reports import BookingDetailRow, CoachRatingRow, MonthlySummaryRow
from ..core.booking.school import SwimmingSchool


def format_time_slot(slot: time) -> str:
    """16:00 -> "16:00 (4:00 PM)"."""
    hour_12 = slot.hour - 12 if slot.hour > 12 else slot.hour
    suffix = "AM" if slot.hour < 12 else "PM"
    return f"{slot.hour:02d}:{slot.minute:02d} ({hour_12}:{slot.minute:02d} {suffix})"


def _table(header: str, rows: Sequence[str], rule: str = "_") -> str:
    line = rule * len(header)
    return "\n".join([line, header, line, *rows])


def timetable_table(lessons: Sequence[SwimmingLesson]) -> str:
    template = "| {:<7} | {:<10} | {:<12} | {:<17} | {:<10} | {:<15} |"
    header = template.format("Grade", "Day", "Date", "Time", "Coach", "Available Slots")
    rows = [
        template.format(
            lesson.grade.name,
            lesson.day.name,
            lesson.date.isoformat(),
            format_time_slot(lesson.time_slot),
            lesson.coach_name,
            lesson.available_slots,
        )
        for lesson in lessons
    ]
    if not rows:
        rows = ["No lessons match."]
    return _table(header, rows)


def bookings_table(school: SwimmingSchool, bookings: Sequence[Booking]) -> str:
    template = "{:<18} | {:<18} | {:<13} | {:<12} | {:<11} | {:<10} | {:<17} | {:<9}"
    header = template.format(
        "Booking ID", "Learner Name", "Current Grade", "Booked Grade",
        "Lesson Date", "Lesson Day", "Lesson Time", "Status",
    )
    rows = []
    for booking in bookings:
        learner = school.learner_for(booking)
        lesson = school.lesson_for(booking)
        rows.append(template.format(
            booking.booking_id,
            learner.name,
            learner.current_grade.name,
            lesson.grade.name,
            lesson.date.isoformat(),
            lesson.day.name,
            format_time_slot(lesson.time_slot),
            booking.status.value,
        ))
    if not rows:
        rows = ["No bookings."]
    return _table(header, rows, rule="-")


def learners_table(learners: Sequence[Learner]) -> str:
    template = "{:<5} | {:<18} | {:<10}"
    header = template.format("ID", "Name", "Grade")
    rows = [
        template.format(learner.id, learner.name, learner.current_grade.name)
        for learner in learners
    ]
    return _table(header, rows, rule="-")


def coach_ratings_table(rows: Sequence[CoachRatingRow]) -> str:
    template = "{:<12} | {:<22} | {:<7}"
    header = template.format("Coach Name", "Average Rating", "Reviews")
    lines = [
        template.format(row.coach_name, f"{row.average_rating:.2f}", row.review_count)
        for row in rows
    ]
    return _table(header, lines, rule="-")


def monthly_summary_table(rows: Sequence[MonthlySummaryRow]) -> str:
    template = "{:<10} | {:<24} | {:<13} | {:<6} | {:<8} | {:<9} | {:<8}"
    header = template.format(
        "LearnerID", "Learner Name", "Current Grade", "Booked", "Changed", "Cancelled", "Attended"
    )
    lines = [
        template.format(
            row.learner_id, row.learner_name, row.current_grade,
            row.booked, row.changed, row.cancelled, row.attended,
        )
        for row in rows
    ]
    return _table(header, lines)


def detailed_report_table(rows: Sequence[BookingDetailRow]) -> str:
    template = "{:<10} | {:<18} | {:<7} | {:<11} | {:<17} | {:<9} | {:<14} | {:<14}"
    header = template.format(
        "LearnerID", "BookingID", "Grade", "Lesson Date", "Time", "Coach", "Booking Status", "Review"
    )
    lines = [
        template.format(
            row.learner_id, row.booking_id, row.grade, row.lesson_date.isoformat(),
            format_time_slot(row.time_slot), row.coach_name, row.status, row.review,
        )
        for row in rows
    ]
    if not lines:
        lines = ["No bookings for this month."]
    return _table(header, lines)
