# src/nbprates/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value types of the rate-retrieval pipeline:
- Currency codes published in NBP Table C
- Validated date ranges
- Raw and decoded rate entries
- The tagged payload variant produced at the decode boundary
- The explicit result type returned by RatesService

Files that USE this module:
- nbprates.application.* (validator and service build and return these)
- nbprates.adapters.* (client, decoder and HTTP routes consume them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from nbprates.domain.errors import RateRetrievalError


class CurrencyCode(str, Enum):
    """Currencies quoted with bid/ask prices in NBP Table C."""

    USD = "USD"
    AUD = "AUD"
    CAD = "CAD"
    EUR = "EUR"
    HUF = "HUF"
    CHF = "CHF"
    GBP = "GBP"
    JPY = "JPY"
    CZK = "CZK"
    DKK = "DKK"
    NOK = "NOK"
    SEK = "SEK"
    XDR = "XDR"

    @classmethod
    def parse(cls, value: str) -> "CurrencyCode":
        """
        Parse a currency code, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the code is not quoted in Table C
        """
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported currency code: {value!r}") from None


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range that passed validation."""
    start: date
    end: date

    @property
    def span_days(self) -> int:
        return (self.end - self.start).days


@dataclass(frozen=True)
class RawRateEntry:
    """One undecoded <Rate> element as published by the NBP API."""
    effective_date: str
    bid: str
    ask: str


@dataclass(frozen=True)
class RateRecord:
    """
    One day's bid/ask pair plus its difference against the previous record.

    Attributes:
        date: Effective date of the quotation
        bid: Buying rate
        ask: Selling rate
        bid_diff: bid minus previous bid rounded to 4 places, None for the first record
        ask_diff: ask minus previous ask rounded to 4 places, None for the first record
    """
    date: date
    bid: Decimal
    ask: Decimal
    bid_diff: Optional[Decimal] = None
    ask_diff: Optional[Decimal] = None

    def as_json(self) -> dict:
        """Return the record in the JSON shape served to API clients."""
        return {
            "date": self.date.isoformat(),
            "bid": float(self.bid),
            "ask": float(self.ask),
            "bidDiff": None if self.bid_diff is None else float(self.bid_diff),
            "askDiff": None if self.ask_diff is None else float(self.ask_diff),
        }


@dataclass(frozen=True)
class SinglePayload:
    """Payload holding exactly one entry (the API drops the list wrapper)."""
    entry: RawRateEntry

    def entries(self) -> list[RawRateEntry]:
        return [self.entry]


@dataclass(frozen=True)
class MultiplePayload:
    """Payload holding zero or more entries in source order."""
    items: tuple[RawRateEntry, ...] = ()

    def entries(self) -> list[RawRateEntry]:
        return list(self.items)


RatePayload = Union[SinglePayload, MultiplePayload]


@dataclass(frozen=True)
class RatesOk:
    """Successful retrieval: the full, diff-annotated record sequence."""
    records: tuple[RateRecord, ...]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> tuple[RateRecord, ...]:
        return self.records


@dataclass(frozen=True)
class RatesFailed:
    """Failed retrieval carrying the typed error; no partial records."""
    error: "RateRetrievalError"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> tuple[RateRecord, ...]:
        raise self.error


RatesResult = Union[RatesOk, RatesFailed]
