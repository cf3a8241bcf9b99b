# src/nbprates/adapters/http/__init__.py
"""
HTTP Adapters - REST Boundary

This package contains the FastAPI router and the shared-secret token gate.
"""

from nbprates.adapters.http.auth import TOKEN_HEADER, system_token_gate
from nbprates.adapters.http.routes import router

__all__ = [
    "TOKEN_HEADER",
    "system_token_gate",
    "router",
]
