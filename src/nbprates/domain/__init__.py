# src/nbprates/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from nbprates.domain.models import (
    CurrencyCode,
    DateRange,
    MultiplePayload,
    RatePayload,
    RateRecord,
    RatesFailed,
    RatesOk,
    RatesResult,
    RawRateEntry,
    SinglePayload,
)
from nbprates.domain.errors import (
    DomainError,
    EmptyResultError,
    InvalidRangeError,
    MalformedPayloadError,
    RateRetrievalError,
    TransportError,
)

__all__ = [
    "CurrencyCode",
    "DateRange",
    "RawRateEntry",
    "RateRecord",
    "SinglePayload",
    "MultiplePayload",
    "RatePayload",
    "RatesOk",
    "RatesFailed",
    "RatesResult",
    "DomainError",
    "RateRetrievalError",
    "InvalidRangeError",
    "TransportError",
    "EmptyResultError",
    "MalformedPayloadError",
]
