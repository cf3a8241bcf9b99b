# src/nbprates/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from nbprates.shared.validators import (
    parse_iso_date,
    tokens_match,
    validate_base_url,
)
from nbprates.shared.logging_conf import setup_logging

__all__ = [
    "parse_iso_date",
    "tokens_match",
    "validate_base_url",
    "setup_logging",
]
