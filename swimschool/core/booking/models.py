"""
Domain models for the lesson booking workflow.

These models represent the core business concepts. They have no dependencies
on the console, the settings layer or the stores. Entities refer to each
other by ID rather than by live reference, so a booking knows which learner
and lesson it belongs to without holding either object.
"""

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum, IntEnum
from typing import Optional

from .errors import InvariantViolation


MIN_LEARNER_AGE = 4
MAX_LEARNER_AGE = 11


class Grade(IntEnum):
    """Swimming grade, 1 (beginner) to 5. Ordered."""
    GRADE_1 = 1
    GRADE_2 = 2
    GRADE_3 = 3
    GRADE_4 = 4
    GRADE_5 = 5

    @classmethod
    def from_value(cls, value: int) -> "Grade":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Grade must be between 1 and 5, got {value}") from None


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_string(cls, value: str) -> "Gender":
        """Parse "male"/"female" in any letter case."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown gender: {value!r}") from None


class Rating(IntEnum):
    """
    How satisfied a learner was with a lesson.

    The integer value is what learners type and what the coach
    rating report averages.
    """
    VERY_DISSATISFIED = 1
    DISSATISFIED = 2
    OK = 3
    SATISFIED = 4
    VERY_SATISFIED = 5

    @classmethod
    def from_value(cls, value: int) -> "Rating":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Rating can only be between 1 and 5, got {value}") from None

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")


class BookingStatus(Enum):
    """
    Lifecycle of a booking.

    BOOKED -> CANCELLED and BOOKED -> ATTENDED are the only transitions.
    A change keeps the booking BOOKED and swaps its lesson.
    """
    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"
    ATTENDED = "ATTENDED"


class DayOfWeek(IntEnum):
    """Days numbered like date.weekday()."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> "DayOfWeek":
        return cls(day.weekday())

    @classmethod
    def from_string(cls, value: str) -> "DayOfWeek":
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown day of week: {value!r}") from None


@dataclass(frozen=True)
class Review:
    """
    A learner's rating of a lesson they attended.

    Frozen because a review is never edited once submitted.
    """
    rating: Rating
    learner_id: str
    grade_value: int
    lesson_date: date
    review_date: date
    comment: Optional[str] = None


@dataclass
class Coach:
    """A coach and the IDs of the lessons they teach."""
    name: str
    lesson_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Coach name cannot be empty")


@dataclass
class SwimmingLesson:
    """
    A single timetabled lesson.

    `capacity` is fixed when the lesson is created; `available_slots`
    moves between 0 and `capacity` as seats are taken and released.
    The `id` is assigned by the timetable when the lesson is added.
    """
    grade: Grade
    date: date
    time_slot: time
    coach_name: str
    capacity: int
    available_slots: Optional[int] = None
    reviews: list[Review] = field(default_factory=list)
    id: str = ""

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("Capacity cannot be negative")
        if self.available_slots is None:
            self.available_slots = self.capacity
        if not 0 <= self.available_slots <= self.capacity:
            raise ValueError("Available slots must be between 0 and capacity")

    @property
    def day(self) -> DayOfWeek:
        return DayOfWeek.of(self.date)

    @property
    def has_free_slot(self) -> bool:
        return self.available_slots > 0

    def reserve_slot(self) -> None:
        """Take one seat."""
        if self.available_slots <= 0:
            raise InvariantViolation(
                f"Lesson {self.id} has no seat left to reserve"
            )
        self.available_slots -= 1

    def release_slot(self) -> None:
        """Give one seat back."""
        if self.available_slots >= self.capacity:
            raise InvariantViolation(
                f"Lesson {self.id} cannot release more seats than its capacity"
            )
        self.available_slots += 1

    def add_review(self, review: Review) -> None:
        self.reviews.append(review)


@dataclass
class Learner:
    """
    A child enrolled at the school.

    The learner keeps the IDs of its bookings in creation order.
    `current_grade` only ever goes up.
    """
    id: str
    name: str
    gender: Gender
    age: int
    emergency_contact: str
    current_grade: Grade
    booking_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Learner name cannot be empty")
        if not MIN_LEARNER_AGE <= self.age <= MAX_LEARNER_AGE:
            raise ValueError(
                f"Learner age must be between {MIN_LEARNER_AGE} and {MAX_LEARNER_AGE}"
            )

    def promote_to(self, grade: Grade) -> None:
        if grade < self.current_grade:
            raise InvariantViolation(
                f"Learner {self.id} cannot move down from {self.current_grade.name} to {grade.name}"
            )
        self.current_grade = grade


@dataclass
class Booking:
    """
    A learner's seat in a lesson.

    `changed` records that the lesson was swapped at least once; the
    status stays BOOKED through a change.
    """
    booking_id: str
    booking_date: date
    learner_id: str
    lesson_id: str
    status: BookingStatus = BookingStatus.BOOKED
    review: Optional[Review] = None
    changed: bool = False

    @property
    def is_active(self) -> bool:
        """Cancelled bookings no longer hold a seat or a grade/date slot."""
        return self.status != BookingStatus.CANCELLED
