# src/nbprates/application/range_validator.py
"""
Range Validator - Date Range Rules for Rate Queries

Checks a (from, to) pair against the allowed lookback window before any
request is made to the NBP API.

Files that USE this module:
- nbprates.application.rates_service (validates every query first)
- tests.test_range_validator (unit tests)

Files that this module USES:
- nbprates.config (settings.max_date_range_days)
- nbprates.domain (DateRange, InvalidRangeError)
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from nbprates.config import settings
from nbprates.domain.errors import InvalidRangeError
from nbprates.domain.models import DateRange


class RangeValidator:
    """Validates requested date ranges; a span of exactly max_days is allowed."""

    def __init__(self, max_days: Optional[int] = None):
        self.max_days = max_days if max_days is not None else settings.max_date_range_days

    def validate(self, date_from: date, date_to: date) -> DateRange:
        """
        Validate ordering first, then span.

        Returns:
            The validated DateRange

        Raises:
            InvalidRangeError: If date_to precedes date_from or the span exceeds max_days
        """
        if date_to < date_from:
            raise InvalidRangeError.inverted()
        if (date_to - date_from).days > self.max_days:
            raise InvalidRangeError.too_wide(self.max_days)
        return DateRange(start=date_from, end=date_to)
