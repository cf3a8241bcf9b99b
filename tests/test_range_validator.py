"""
Range Validator Tests - Unit Tests for Date Range Rules

This module contains unit tests for RangeValidator, covering ordering,
span limits and the inclusive boundary at the maximum span.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- nbprates.application.range_validator (RangeValidator for testing)
- nbprates.domain (DateRange, InvalidRangeError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date, timedelta  # Date utilities for building ranges

from nbprates.application.range_validator import RangeValidator  # Validator to test
from nbprates.domain import DateRange, InvalidRangeError  # Result and error types


class TestRangeValidator:
    def test_default_max_days_from_settings(self):
        assert RangeValidator().max_days == 7

    def test_same_day_range_is_valid(self):
        result = RangeValidator().validate(date(2024, 1, 2), date(2024, 1, 2))
        assert result == DateRange(start=date(2024, 1, 2), end=date(2024, 1, 2))
        assert result.span_days == 0

    def test_span_of_exactly_seven_days_is_valid(self):
        result = RangeValidator().validate(date(2024, 1, 1), date(2024, 1, 8))
        assert result.span_days == 7

    def test_span_of_eight_days_is_rejected(self):
        with pytest.raises(InvalidRangeError, match="Date range cannot exceed 7 days") as exc_info:
            RangeValidator().validate(date(2024, 1, 1), date(2024, 1, 9))
        assert exc_info.value.reason == InvalidRangeError.TOO_WIDE
        assert exc_info.value.max_days == 7

    def test_inverted_range_is_rejected(self):
        with pytest.raises(InvalidRangeError, match="dateTo must be greater than or equal to dateFrom") as exc_info:
            RangeValidator().validate(date(2024, 1, 5), date(2024, 1, 4))
        assert exc_info.value.reason == InvalidRangeError.INVERTED
        assert exc_info.value.max_days is None

    def test_inverted_check_runs_before_span_check(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            RangeValidator().validate(date(2024, 3, 1), date(2024, 1, 1))
        assert exc_info.value.reason == InvalidRangeError.INVERTED

    @pytest.mark.parametrize("span", range(0, 8))
    def test_every_span_within_window_is_valid(self, span):
        start = date(2024, 2, 26)
        result = RangeValidator().validate(start, start + timedelta(days=span))
        assert result.span_days == span

    def test_range_across_year_boundary(self):
        result = RangeValidator().validate(date(2023, 12, 29), date(2024, 1, 5))
        assert result.span_days == 7

    def test_custom_max_days(self):
        validator = RangeValidator(max_days=2)
        validator.validate(date(2024, 1, 1), date(2024, 1, 3))
        with pytest.raises(InvalidRangeError, match="cannot exceed 2 days"):
            validator.validate(date(2024, 1, 1), date(2024, 1, 4))
