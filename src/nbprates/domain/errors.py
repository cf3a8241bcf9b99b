# src/nbprates/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the failures the rate-retrieval pipeline can produce.
Components raise them; RatesService converts them into a RatesFailed result.

Files that USE this module:
- nbprates.application.range_validator (raises InvalidRangeError)
- nbprates.adapters.providers.nbp (raises TransportError)
- nbprates.adapters.parsing.nbp_xml (raises EmptyResultError, MalformedPayloadError)
- nbprates.application.rates_service (wraps all of them into results)
- nbprates.adapters.http.routes (maps them to HTTP status codes)

Files that this module USES:
- nbprates.domain.models (CurrencyCode carried by TransportError)
"""
from __future__ import annotations

from typing import Optional

from nbprates.domain.models import CurrencyCode


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateRetrievalError(DomainError):
    """Base exception for every failure of the rate-retrieval pipeline."""
    pass


class InvalidRangeError(RateRetrievalError):
    """Raised when the requested date range is inverted or too wide."""

    INVERTED = "inverted"
    TOO_WIDE = "too_wide"

    def __init__(self, message: str, reason: str, max_days: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.max_days = max_days

    @classmethod
    def inverted(cls) -> "InvalidRangeError":
        return cls("dateTo must be greater than or equal to dateFrom", cls.INVERTED)

    @classmethod
    def too_wide(cls, max_days: int) -> "InvalidRangeError":
        return cls(f"Date range cannot exceed {max_days} days", cls.TOO_WIDE, max_days)


class TransportError(RateRetrievalError):
    """
    Raised when the NBP API is unreachable or answers with a non-200 status.

    Attributes:
        status_code: HTTP status returned by the API, None on timeout or connection failure
        currency: Currency the request was made for
    """

    def __init__(self, currency: CurrencyCode, status_code: Optional[int] = None, cause: str = ""):
        self.currency = currency
        self.status_code = status_code
        if status_code is not None:
            message = f"NBP API returned HTTP {status_code} for currency {currency.value}"
        else:
            message = f"NBP API request failed for currency {currency.value}: {cause or 'unknown error'}"
        super().__init__(message)


class EmptyResultError(RateRetrievalError):
    """Raised when the API answered successfully but listed no rates."""

    def __init__(self, message: str = "No rates found in NBP XML response"):
        super().__init__(message)


class MalformedPayloadError(RateRetrievalError):
    """Raised when the API body is not XML or an entry lacks a date, bid or ask."""
    pass
