# src/nbprates/adapters/providers/nbp.py
"""
NBP API Provider for Table C Bid/Ask Rates

This module implements the HTTP client for the National Bank of Poland
exchange rate API. It builds the query URL for Table C, performs exactly
one GET request per call and maps the transport outcome. Decoding the
body is left to NbpXmlDecoder.

Files that USE this module:
- nbprates.app (build_rates_service wires NbpApiClient)
- tests.test_providers (unit tests)

Files that this module USES:
- nbprates.adapters.providers.base (RateSource interface)
- nbprates.config (settings for base URL and timeout)
- nbprates.domain (CurrencyCode, TransportError)
"""
import logging
from datetime import date
from typing import Optional

import requests

from nbprates.adapters.providers.base import RateSource
from nbprates.config import settings
from nbprates.domain.errors import TransportError
from nbprates.domain.models import CurrencyCode

log = logging.getLogger(__name__)


class NbpApiClient(RateSource):
    # Table C publishes buying (bid) and selling (ask) rates
    TABLE = "C"
    FORMAT = "xml"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize NBP API client.

        Args:
            base_url: Optional API base URL (defaults to settings.nbp_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)

        Raises:
            ValueError: If the base URL is empty
        """
        url = base_url or settings.nbp_url
        if not url:
            raise ValueError("APP_NBP_URL is not configured.")
        self.base_url = url.rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    def build_url(self, currency: CurrencyCode, date_from: date, date_to: date) -> str:
        """
        Build the Table C query URL.

        Returns:
            URL of the form {base}/C/{currency}/{from}/{to}/?format=xml
        """
        return "%s/%s/%s/%s/%s/?format=%s" % (
            self.base_url,
            self.TABLE,
            currency.value.lower(),
            date_from.strftime("%Y-%m-%d"),
            date_to.strftime("%Y-%m-%d"),
            self.FORMAT,
        )

    def fetch(self, currency: CurrencyCode, date_from: date, date_to: date) -> str:
        """
        Fetch the raw XML body for a currency and date range.

        Returns:
            Response body exactly as received

        Raises:
            TransportError: On timeout, connection failure or any status other than 200
        """
        url = self.build_url(currency, date_from, date_to)
        log.info(
            "Fetching NBP exchange rates: url=%s currency=%s from=%s to=%s",
            url, currency.value, date_from.isoformat(), date_to.isoformat(),
        )

        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("NBP API timeout after %d seconds: url=%s", self.timeout, url)
            raise TransportError(currency, cause="timeout") from e
        except requests.exceptions.RequestException as e:
            log.warning("NBP API request failed: url=%s error=%s", url, e)
            raise TransportError(currency, cause="connection error") from e

        if resp.status_code != 200:
            log.error("NBP API error: status_code=%d url=%s", resp.status_code, url)
            raise TransportError(currency, status_code=resp.status_code)

        log.debug("NBP API responded with %d bytes", len(resp.content or b""))
        return resp.text
