"""
Lesson booking logic.

Contains the domain models, the rules engine, reports, and the school
facade the console talks to.
"""

from .context import BookingIdGenerator, SchoolContext
from .errors import BookingError, ErrorKind, InvariantViolation
from .models import (
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
from .result import Result, ResultStatus
from .school import SwimmingSchool

__all__ = [
    "Booking",
    "BookingError",
    "BookingIdGenerator",
    "BookingStatus",
    "Coach",
    "DayOfWeek",
    "ErrorKind",
    "Gender",
    "Grade",
    "InvariantViolation",
    "Learner",
    "Rating",
    "Result",
    "ResultStatus",
    "Review",
    "SchoolContext",
    "SwimmingLesson",
    "SwimmingSchool",
]
