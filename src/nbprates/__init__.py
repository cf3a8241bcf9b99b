# src/nbprates/__init__.py
"""
NBP Rates - Bid/Ask Exchange Rates Service

Serves historical bid/ask exchange rates from the National Bank of Poland
Table C for a currency and a short date range, annotated with
day-over-day differences.
"""

__version__ = "1.0.0"
