# src/nbprates/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (NBP API)
- Parsing (XML responses)
- HTTP (REST boundary)
"""

__all__ = []
