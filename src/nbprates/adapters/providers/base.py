# src/nbprates/adapters/providers/base.py
"""
Base Provider Interface for Rate Sources

This module defines the abstract base class for rate sources. A source
performs one outbound request and hands back the raw body untouched.

Files that USE this module:
- nbprates.adapters.providers.nbp (NbpApiClient implements RateSource)
- nbprates.application.rates_service (depends on RateSource)

Files that this module USES:
- nbprates.domain.models (CurrencyCode)
"""
from abc import ABC, abstractmethod
from datetime import date

from nbprates.domain.models import CurrencyCode


class RateSource(ABC):
    @abstractmethod
    def fetch(self, currency: CurrencyCode, date_from: date, date_to: date) -> str:
        """Return the raw response body for the currency and inclusive date range."""
        raise NotImplementedError
