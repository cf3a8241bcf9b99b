# src/nbprates/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateSource interface.
"""

from nbprates.adapters.providers.base import RateSource
from nbprates.adapters.providers.nbp import NbpApiClient

__all__ = [
    "RateSource",
    "NbpApiClient",
]
