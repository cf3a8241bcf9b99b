# src/nbprates/adapters/parsing/nbp_xml.py
"""
NBP XML Decoder - Raw Payload to Rate Records

This module turns the XML body returned by the NBP API into an ordered
sequence of RateRecord values with day-over-day differences.

The API drops the list wrapper when a single day matches, so <Rates>
holds either one <Rate> or several. xmltodict reproduces that quirk
(a dict for one child, a list for many); the shape is captured once as a
SinglePayload or MultiplePayload and normalized before any arithmetic.

Files that USE this module:
- nbprates.app (build_rates_service wires NbpXmlDecoder)
- nbprates.application.rates_service (decodes fetched bodies)
- tests.test_nbp_xml (unit tests)

Files that this module USES:
- nbprates.domain (payload variants, RateRecord, decode errors)
- nbprates.shared.validators (parse_iso_date)
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional, Union
from xml.parsers.expat import ExpatError

import xmltodict

from nbprates.domain.errors import EmptyResultError, MalformedPayloadError
from nbprates.domain.models import (
    MultiplePayload,
    RatePayload,
    RateRecord,
    RawRateEntry,
    SinglePayload,
)
from nbprates.shared.validators import parse_iso_date

log = logging.getLogger(__name__)

# Diffs are rounded half-up to 4 decimal places
DIFF_QUANTUM = Decimal("0.0001")
DIFF_ROUNDING = ROUND_HALF_UP

_ENTRY_FIELDS = ("EffectiveDate", "Bid", "Ask")


def round_diff(value: Decimal) -> Decimal:
    """Round a difference to 4 decimal places, half-up."""
    return value.quantize(DIFF_QUANTUM, rounding=DIFF_ROUNDING)


def _raw_entry(node: Any) -> RawRateEntry:
    if not isinstance(node, Mapping):
        raise MalformedPayloadError(f"Unexpected <Rate> element: {node!r}")
    missing = [field for field in _ENTRY_FIELDS if not node.get(field)]
    if missing:
        raise MalformedPayloadError(f"<Rate> element is missing {', '.join(missing)}")
    return RawRateEntry(
        effective_date=str(node["EffectiveDate"]),
        bid=str(node["Bid"]),
        ask=str(node["Ask"]),
    )


def payload_from_document(document: Optional[Mapping[str, Any]]) -> RatePayload:
    """
    Locate the <Rate> elements of a parsed document and tag their shape.

    Args:
        document: Output of xmltodict.parse, e.g. {"ExchangeRatesSeries": {..., "Rates": {...}}}

    Returns:
        SinglePayload when <Rates> holds a bare entry, MultiplePayload otherwise
        (empty when <Rates> is missing or has no children)
    """
    if not document:
        return MultiplePayload()

    series = next(iter(document.values()))
    rates = series.get("Rates") if isinstance(series, Mapping) else None
    node = rates.get("Rate") if isinstance(rates, Mapping) else None

    if node is None:
        return MultiplePayload()
    if isinstance(node, Mapping) and "EffectiveDate" in node:
        return SinglePayload(_raw_entry(node))
    if isinstance(node, list):
        return MultiplePayload(tuple(_raw_entry(item) for item in node))
    raise MalformedPayloadError(f"Unexpected <Rates> content: {node!r}")


def _to_decimal(value: str, field: str) -> Decimal:
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        raise MalformedPayloadError(f"Invalid {field} value: {value!r}") from None
    if not number.is_finite():
        raise MalformedPayloadError(f"Invalid {field} value: {value!r}")
    return number


def annotate_diffs(entries: Iterable[RawRateEntry]) -> list[RateRecord]:
    """
    Convert raw entries into records, in source order, with differences
    against the immediately preceding entry.

    The first record carries None diffs.
    """
    records: list[RateRecord] = []
    previous_bid: Optional[Decimal] = None
    previous_ask: Optional[Decimal] = None

    for entry in entries:
        try:
            effective = parse_iso_date(entry.effective_date)
        except ValueError:
            raise MalformedPayloadError(f"Invalid EffectiveDate value: {entry.effective_date!r}") from None
        bid = _to_decimal(entry.bid, "Bid")
        ask = _to_decimal(entry.ask, "Ask")

        records.append(RateRecord(
            date=effective,
            bid=bid,
            ask=ask,
            bid_diff=round_diff(bid - previous_bid) if previous_bid is not None else None,
            ask_diff=round_diff(ask - previous_ask) if previous_ask is not None else None,
        ))
        previous_bid, previous_ask = bid, ask

    return records


class NbpXmlDecoder:
    """Decoder for NBP API XML responses (format=xml)."""

    def parse_payload(self, raw: Union[str, bytes]) -> RatePayload:
        """
        Parse the raw body into a tagged payload.

        Raises:
            MalformedPayloadError: If the body is not well-formed XML
        """
        if not raw or not raw.strip():
            return MultiplePayload()
        try:
            document = xmltodict.parse(raw)
        except ExpatError as e:
            log.error("NBP response is not valid XML: %s", e)
            raise MalformedPayloadError(f"NBP response is not valid XML: {e}") from e
        return payload_from_document(document)

    def decode(self, raw: Union[str, bytes]) -> list[RateRecord]:
        """
        Decode an NBP XML body into diff-annotated rate records.

        Args:
            raw: Response body as returned by the API

        Returns:
            Records ordered as published by the API

        Raises:
            EmptyResultError: If the body lists no rates
            MalformedPayloadError: If the body or one of its entries cannot be read
        """
        entries = self.parse_payload(raw).entries()
        if not entries:
            raise EmptyResultError()
        return annotate_diffs(entries)
