# src/nbprates/application/rates_service.py
"""
Rates Service - Business Logic for Exchange Rate Retrieval

This module contains the orchestration of the rate-retrieval pipeline:
validate the range, fetch the raw body once, decode it into records.
It is the only place where pipeline errors become RatesFailed results.

Files that USE this module:
- nbprates.app (build_rates_service creates the service)
- nbprates.adapters.http.routes (GET /api/nbp/rates)
- tests.test_rates_service (unit tests)

Files that this module USES:
- nbprates.application.range_validator (RangeValidator)
- nbprates.adapters.providers.base (RateSource interface)
- nbprates.adapters.parsing.nbp_xml (NbpXmlDecoder)
- nbprates.domain (CurrencyCode, results and errors)
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from nbprates.adapters.parsing.nbp_xml import NbpXmlDecoder
from nbprates.adapters.providers.base import RateSource
from nbprates.application.range_validator import RangeValidator
from nbprates.domain.errors import RateRetrievalError
from nbprates.domain.models import CurrencyCode, RatesFailed, RatesOk, RatesResult

log = logging.getLogger(__name__)


class RatesService:
    """
    High-level service returning diff-annotated bid/ask rates.
    Holds no state between calls; every call makes at most one remote request.
    """
    def __init__(
        self,
        source: RateSource,
        decoder: Optional[NbpXmlDecoder] = None,
        validator: Optional[RangeValidator] = None,
    ):
        """
        Initialize rates service.

        Args:
            source: RateSource performing the remote request (typically NbpApiClient)
            decoder: Decoder for the raw body (defaults to NbpXmlDecoder)
            validator: Date range validator (defaults to RangeValidator from settings)
        """
        self.source = source
        self.decoder = decoder or NbpXmlDecoder()
        self.validator = validator or RangeValidator()

    def get_rates(self, currency: CurrencyCode, date_from: date, date_to: date) -> RatesResult:
        """
        Get bid/ask rates for a currency and an inclusive date range.

        Returns:
            RatesOk with the complete record sequence, or RatesFailed carrying an
            InvalidRangeError, TransportError, EmptyResultError or MalformedPayloadError
        """
        try:
            date_range = self.validator.validate(date_from, date_to)
            raw = self.source.fetch(currency, date_range.start, date_range.end)
            records = self.decoder.decode(raw)
        except RateRetrievalError as e:
            log.warning("Rate retrieval failed for %s (%s): %s", currency.value, type(e).__name__, e)
            return RatesFailed(e)

        log.info("NBP rates fetched successfully: currency=%s count=%d", currency.value, len(records))
        return RatesOk(tuple(records))
