# src/nbprates/app.py
"""
Application Entry Point - Service Wiring and Startup

This module serves as the composition root for the NBP rates service.
It wires the rate pipeline, builds the FastAPI application and starts
the HTTP server.

Files that USE this module:
- nbp-rates console script and python -m nbprates (main)
- tests.test_http_api (create_app)

Files that this module USES:
- nbprates.shared.logging_conf (setup_logging for logging configuration)
- nbprates.config (settings for configuration management)
- nbprates.adapters.providers.nbp (NbpApiClient)
- nbprates.adapters.parsing.nbp_xml (NbpXmlDecoder)
- nbprates.application (RangeValidator, RatesService)
- nbprates.adapters.http (router and system token gate)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from nbprates import __version__
from nbprates.adapters.http import router, system_token_gate
from nbprates.adapters.parsing.nbp_xml import NbpXmlDecoder
from nbprates.adapters.providers.nbp import NbpApiClient
from nbprates.application import RangeValidator, RatesService
from nbprates.config import settings
from nbprates.shared.logging_conf import setup_logging

log = logging.getLogger(__name__)


def build_rates_service() -> RatesService:
    """Wire the rate pipeline from settings."""
    return RatesService(
        source=NbpApiClient(base_url=settings.nbp_url, timeout=settings.http_timeout_seconds),
        decoder=NbpXmlDecoder(),
        validator=RangeValidator(max_days=settings.max_date_range_days),
    )


def create_app(
    rates_service: Optional[RatesService] = None,
    system_token: Optional[str] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        rates_service: Service handling rate queries (defaults to build_rates_service())
        system_token: Token required in X-TOKEN-SYSTEM (defaults to settings.system_token)
    """
    app = FastAPI(
        title="NBP Rates",
        version=__version__,
        description="Bid/ask exchange rates from NBP Table C with day-over-day differences.",
    )
    app.state.rates_service = rates_service or build_rates_service()
    token = settings.system_token if system_token is None else system_token
    app.middleware("http")(system_token_gate(token))
    app.include_router(router)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


def main() -> None:
    """
    Configure logging and serve the API with uvicorn.
    """
    setup_logging(
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    log.info("Starting NBP rates service %s on %s:%d", __version__, settings.host, settings.port)
    log.info("NBP API base URL: %s", settings.nbp_url)

    try:
        uvicorn.run(create_app(), host=settings.host, port=settings.port, log_config=None)
    except KeyboardInterrupt:
        log.info("Service stopped by user")
    except Exception:
        log.exception("Service terminated with an unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
