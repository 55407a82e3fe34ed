"""Unit tests for the Result type."""

import pytest

from swimschool.core.booking.errors import BookingError, ErrorKind
from swimschool.core.booking.result import Result, ResultStatus


class TestResult:

    def test_success_carries_value_and_message(self):
        result = Result.success("L11741780000000", "Booked")

        assert result.status is ResultStatus.SUCCESS
        assert result.is_success
        assert not result.is_failure
        assert result.value == "L11741780000000"
        assert result.message == "Booked"
        assert result.kind is None

    def test_failure_carries_error_kind(self):
        result = Result.failure(ErrorKind.NO_SLOTS_AVAILABLE, "Full")

        assert result.is_failure
        assert result.kind is ErrorKind.NO_SLOTS_AVAILABLE
        assert result.error == BookingError(ErrorKind.NO_SLOTS_AVAILABLE, "Full")
        assert result.value is None

    def test_unwrap_failure_raises(self):
        with pytest.raises(ValueError, match="Full"):
            Result.failure(ErrorKind.NO_SLOTS_AVAILABLE, "Full").unwrap()

    def test_unwrap_or_falls_back_on_failure(self):
        assert Result.success(3).unwrap_or(0) == 3
        assert Result.failure(ErrorKind.INVALID_RATING, "bad").unwrap_or(0) == 0

    def test_map_transforms_success_only(self):
        assert Result.success(2, "ok").map(lambda v: v * 10).value == 20

        failed = Result.failure(ErrorKind.INVALID_DATE, "past").map(lambda v: v * 10)
        assert failed.kind is ErrorKind.INVALID_DATE
        assert failed.message == "past"

    def test_error_kinds_use_readable_values(self):
        assert ErrorKind.NO_SLOTS_AVAILABLE.value == "NoSlotsAvailable"
        assert ErrorKind.INVALID_LESSON.value == "InvalidLesson"
