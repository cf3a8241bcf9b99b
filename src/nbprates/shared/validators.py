# src/nbprates/shared/validators.py
"""
Input Validation Utilities - Security and Data Validation

This module provides small validation helpers shared across layers:
URL checks for configuration, ISO date parsing and constant-time
comparison of shared secrets.

Files that USE this module:
- nbprates.config.settings (validate_base_url in Settings field validators)
- nbprates.adapters.parsing.nbp_xml (parse_iso_date for EffectiveDate)
- nbprates.adapters.http.auth (tokens_match for the X-TOKEN-SYSTEM gate)

Files that this module USES:
- None (pure utility functions)
"""
import hmac
import re
from datetime import date, datetime
from typing import Optional


def validate_base_url(url: str) -> bool:
    """
    Validate that a base URL is an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False
    return bool(re.match(r'^https?://[^\s/]+(/\S*)?$', url))


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Raises:
        ValueError: If the value is not a valid ISO calendar date
    """
    return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()


def tokens_match(expected: str, provided: Optional[str]) -> bool:
    """
    Compare a shared secret against a provided value in constant time.

    An empty expected token never matches, so an unconfigured server
    rejects every request.

    Args:
        expected: Token configured on the server
        provided: Token sent by the client (None when the header is absent)

    Returns:
        True if both tokens are non-empty and equal, False otherwise
    """
    if not expected or provided is None:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))
