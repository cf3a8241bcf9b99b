# src/nbprates/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from nbprates.application.range_validator import RangeValidator
from nbprates.application.rates_service import RatesService

__all__ = [
    "RangeValidator",
    "RatesService",
]
