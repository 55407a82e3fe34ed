"""
Booking rules engine.

This module decides whether a booking, change, cancellation, attendance
mark or review is allowed, and applies it when it is. Each function takes
the SchoolContext it works against; none of them keep state of their own.

Rejections come back as failed Results carrying an ErrorKind. Only a broken
internal invariant raises (InvariantViolation).
"""

import logging
from typing import Optional

from .context import SchoolContext
from .errors import ErrorKind
from .models import (
    Booking,
    BookingStatus,
    Grade,
    Learner,
    Rating,
    Review,
    SwimmingLesson,
)
from .result import Result


logger = logging.getLogger(__name__)

TOO_ADVANCED_MESSAGE = (
    "Learner cannot book this lesson. It's either too advanced or not "
    "available for their grade."
)


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------

def is_eligible(learner_grade: Grade, lesson_grade: Grade) -> bool:
    """
    A learner may book their own grade, any lower grade, or exactly one
    grade above. Equivalent to lesson_grade <= learner_grade + 1.
    """
    same_or_next = learner_grade <= lesson_grade <= learner_grade + 1
    return same_or_next or learner_grade >= lesson_grade


def _promote_for(learner: Learner, lesson: SwimmingLesson) -> None:
    # Booking one grade up moves the learner up to it
    if lesson.grade == learner.current_grade + 1:
        previous = learner.current_grade
        learner.promote_to(lesson.grade)
        logger.info(
            "Learner promoted",
            extra={
                "learner_id": learner.id,
                "from_grade": previous.value,
                "to_grade": lesson.grade.value,
            }
        )


def _find_clash(
    school: SchoolContext,
    learner: Learner,
    lesson: SwimmingLesson,
    ignore: Optional[str] = None,
) -> Optional[Booking]:
    """Active booking the learner already holds for the lesson's grade and date."""
    for existing in school.bookings_of(learner):
        if existing.booking_id == ignore or not existing.is_active:
            continue
        booked = school.lesson_of(existing)
        if booked.grade == lesson.grade and booked.date == lesson.date:
            return existing
    return None


def _reject(operation: str, kind: ErrorKind, message: str, **context) -> Result:
    logger.warning(
        "Booking operation rejected",
        extra={"operation": operation, "kind": kind.value, **context}
    )
    return Result.failure(kind, message)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def create_booking(
    school: SchoolContext,
    lesson: Optional[SwimmingLesson],
    learner: Optional[Learner],
) -> Result[str]:
    """
    Book `lesson` for `learner`.

    Returns the new booking ID. Takes a seat and promotes the learner when
    the lesson is one grade above their current grade.
    """
    if lesson is None or learner is None:
        return _reject(
            "create",
            ErrorKind.INVALID_LESSON,
            "Lesson or learner not found with given details, retry with valid details.",
        )

    if lesson.available_slots <= 0:
        return _reject(
            "create",
            ErrorKind.NO_SLOTS_AVAILABLE,
            f"No slots available for lesson {lesson.grade.name} on {lesson.date}",
            lesson_id=lesson.id,
        )

    if not is_eligible(learner.current_grade, lesson.grade):
        return _reject(
            "create",
            ErrorKind.INVALID_BOOKING,
            TOO_ADVANCED_MESSAGE,
            learner_id=learner.id,
            lesson_id=lesson.id,
        )

    clash = _find_clash(school, learner, lesson)
    if clash is not None:
        return _reject(
            "create",
            ErrorKind.ALREADY_REGISTERED,
            f"You have already registered for the lesson with Id: {clash.booking_id}",
            learner_id=learner.id,
        )

    booking_id = school.new_booking_id(learner.id)
    booking = Booking(
        booking_id=booking_id,
        booking_date=school.today(),
        learner_id=learner.id,
        lesson_id=lesson.id,
    )

    lesson.reserve_slot()
    learner.booking_ids.append(booking_id)
    school.ledger.add(booking)
    _promote_for(learner, lesson)

    logger.info(
        "Booking created",
        extra={
            "booking_id": booking_id,
            "learner_id": learner.id,
            "lesson_id": lesson.id,
            "available_slots": lesson.available_slots,
        }
    )

    return Result.success(
        booking_id,
        f"You have successfully registered the lesson {lesson.grade.name} on "
        f"{lesson.date} with booking Id : {booking_id}",
    )


def change_booking(
    school: SchoolContext,
    booking: Optional[Booking],
    learner: Optional[Learner],
    new_lesson: Optional[SwimmingLesson],
) -> Result[str]:
    """
    Move a BOOKED booking to another lesson.

    The booking keeps its ID and status. The old lesson gets its seat back
    and the new lesson loses one.
    """
    if booking is None:
        return _reject("change", ErrorKind.INVALID_BOOKING, "Invalid booking")

    if booking.status == BookingStatus.CANCELLED:
        return _reject(
            "change",
            ErrorKind.INVALID_BOOKING,
            f"Booking {booking.booking_id} is cancelled and cannot be changed",
        )
    if booking.status == BookingStatus.ATTENDED:
        return _reject(
            "change",
            ErrorKind.INVALID_BOOKING,
            f"Booking {booking.booking_id} is already attended and cannot be changed",
        )

    if learner is None or learner.id != booking.learner_id:
        return _reject(
            "change",
            ErrorKind.INVALID_LEARNER,
            f"Learner is invalid for booking {booking.booking_id}",
        )

    if new_lesson is None:
        return _reject(
            "change",
            ErrorKind.INVALID_LESSON,
            "Lesson not found with given details, retry with valid details.",
        )

    current = school.lesson_of(booking)
    if current.date < school.today():
        return _reject(
            "change",
            ErrorKind.INVALID_DATE,
            f"Learner - {learner.id} has already attended the session "
            f"{current.grade.name} on {current.date}. Change not allowed",
            booking_id=booking.booking_id,
        )

    if not is_eligible(learner.current_grade, new_lesson.grade):
        return _reject(
            "change",
            ErrorKind.INVALID_BOOKING,
            TOO_ADVANCED_MESSAGE,
            booking_id=booking.booking_id,
        )

    # capacity is the fixed size of the lesson; the seat count guard keeps
    # available_slots from going below zero
    if new_lesson.capacity <= 0 or new_lesson.available_slots <= 0:
        return _reject(
            "change",
            ErrorKind.NO_SLOTS_AVAILABLE,
            f"No slots available for lesson {new_lesson.grade.name} on {new_lesson.date}",
            lesson_id=new_lesson.id,
        )

    if new_lesson.id == current.id:
        return _reject(
            "change",
            ErrorKind.ALREADY_REGISTERED,
            f"You have already registered for the lesson with Id: {booking.booking_id}",
        )

    clash = _find_clash(school, learner, new_lesson, ignore=booking.booking_id)
    if clash is not None:
        return _reject(
            "change",
            ErrorKind.ALREADY_REGISTERED,
            f"You have already registered for the lesson with Id: {clash.booking_id}",
        )

    current.release_slot()
    booking.lesson_id = new_lesson.id
    booking.changed = True
    _promote_for(learner, new_lesson)
    new_lesson.reserve_slot()

    logger.info(
        "Booking changed",
        extra={
            "booking_id": booking.booking_id,
            "from_lesson": current.id,
            "to_lesson": new_lesson.id,
        }
    )

    message = (
        f"Your Booking {booking.booking_id} has been successfully changed to lesson "
        f"{new_lesson.grade.name} on {new_lesson.date}"
    )
    return Result.success(message, message)


def cancel_booking(school: SchoolContext, booking: Optional[Booking]) -> Result[str]:
    """Cancel a BOOKED booking and give its seat back."""
    if booking is None:
        return _reject("cancel", ErrorKind.INVALID_BOOKING, "Invalid booking details.")

    if booking.status == BookingStatus.ATTENDED:
        return _reject(
            "cancel",
            ErrorKind.INVALID_BOOKING,
            "Invalid booking details. Booking is already attended",
            booking_id=booking.booking_id,
        )
    if booking.status == BookingStatus.CANCELLED:
        return _reject(
            "cancel",
            ErrorKind.INVALID_BOOKING,
            f"Booking {booking.booking_id} is already cancelled",
            booking_id=booking.booking_id,
        )

    lesson = school.lesson_of(booking)
    today = school.today()
    if booking.booking_date < today or lesson.date < today:
        return _reject(
            "cancel",
            ErrorKind.INVALID_DATE,
            "Lesson date has already passed. Cancel rejected.",
            booking_id=booking.booking_id,
        )

    booking.status = BookingStatus.CANCELLED
    lesson.release_slot()

    logger.info(
        "Booking cancelled",
        extra={"booking_id": booking.booking_id, "lesson_id": lesson.id}
    )

    message = (
        f"Your booking : {booking.booking_id} for lesson {lesson.grade.name} on "
        f"{lesson.date} has been cancelled successfully."
    )
    return Result.success(message, message)


def mark_attended(school: SchoolContext, booking: Optional[Booking]) -> Result[str]:
    """
    Mark a BOOKED booking as attended, on or after the lesson date.

    The lesson's seat count goes back up by one.
    """
    if booking is None:
        return _reject("attend", ErrorKind.INVALID_BOOKING, "Invalid booking details.")

    if booking.status == BookingStatus.CANCELLED:
        return _reject(
            "attend",
            ErrorKind.INVALID_BOOKING,
            "Lesson is cancelled and cannot be changed",
            booking_id=booking.booking_id,
        )
    if booking.status == BookingStatus.ATTENDED:
        return _reject(
            "attend",
            ErrorKind.INVALID_BOOKING,
            f"Booking {booking.booking_id} is already marked as attended",
            booking_id=booking.booking_id,
        )

    lesson = school.lesson_of(booking)
    if lesson.date > school.today():
        return _reject(
            "attend",
            ErrorKind.INVALID_BOOKING,
            "Cannot mark attended as the lesson has not started yet",
            booking_id=booking.booking_id,
        )

    booking.status = BookingStatus.ATTENDED
    lesson.release_slot()

    logger.info(
        "Booking attended",
        extra={"booking_id": booking.booking_id, "lesson_id": lesson.id}
    )

    message = (
        f"Learner - {booking.learner_id} has attended the Lesson "
        f"{lesson.grade.name} on {lesson.date}"
    )
    return Result.success(message, message)


def submit_review(
    school: SchoolContext,
    learner: Optional[Learner],
    booking: Optional[Booking],
    rating: int,
    comment: Optional[str] = None,
) -> Result[str]:
    """
    Rate an attended lesson.

    The review is attached to the booking (replacing any earlier one) and
    appended to the lesson's review list.
    """
    if learner is None:
        return _reject("review", ErrorKind.INVALID_LEARNER, "Learner does not exist.")

    if booking is None:
        return _reject(
            "review", ErrorKind.INVALID_BOOKING, "Please enter correct booking details."
        )

    if booking.learner_id != learner.id:
        return _reject(
            "review",
            ErrorKind.INVALID_LEARNER,
            f"Learner {learner.id} is invalid for booking {booking.booking_id}",
        )

    if not 1 <= rating <= 5:
        return _reject(
            "review",
            ErrorKind.INVALID_RATING,
            "Rating can only be between 1 and 5.",
            booking_id=booking.booking_id,
        )

    lesson = school.lesson_of(booking)
    if booking.status != BookingStatus.ATTENDED:
        return _reject(
            "review",
            ErrorKind.INVALID_DATE,
            f"Lesson {lesson.grade.name} has not been attended by learner {learner.id}",
            booking_id=booking.booking_id,
        )

    review = Review(
        rating=Rating.from_value(rating),
        learner_id=learner.id,
        grade_value=lesson.grade.value,
        lesson_date=lesson.date,
        review_date=school.today(),
        comment=comment,
    )
    lesson.add_review(review)
    booking.review = review

    logger.info(
        "Review submitted",
        extra={
            "booking_id": booking.booking_id,
            "coach": lesson.coach_name,
            "rating": review.rating.value,
        }
    )

    message = f"Learner {learner.id} has rated {rating} for lesson {lesson.grade.name}"
    return Result.success(message, message)
