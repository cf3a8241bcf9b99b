# src/nbprates/adapters/parsing/__init__.py
"""
Parsing Adapters - Response Decoders

This package contains decoders turning raw API bodies into domain records.
"""

from nbprates.adapters.parsing.nbp_xml import NbpXmlDecoder, annotate_diffs, round_diff

__all__ = [
    "NbpXmlDecoder",
    "annotate_diffs",
    "round_diff",
]
