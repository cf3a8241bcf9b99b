# src/nbprates/adapters/http/auth.py
"""
System Token Gate - Shared-Secret Header Check

HTTP middleware requiring a valid X-TOKEN-SYSTEM header on every request
under /api/nbp. It runs before any route, so the rate pipeline is never
reached by unauthenticated requests.

Files that USE this module:
- nbprates.app (create_app registers the middleware)
- tests.test_http_api (integration tests)

Files that this module USES:
- nbprates.shared.validators (tokens_match for constant-time comparison)
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from nbprates.shared.validators import tokens_match

log = logging.getLogger(__name__)

TOKEN_HEADER = "X-TOKEN-SYSTEM"
PROTECTED_PREFIX = "/api/nbp"

CallNext = Callable[[Request], Awaitable[Response]]


def system_token_gate(expected_token: str, prefix: str = PROTECTED_PREFIX):
    """
    Build the token-checking middleware.

    Args:
        expected_token: Token clients must send; an empty token rejects every request
        prefix: Path prefix the gate applies to

    Returns:
        Coroutine function suitable for app.middleware("http")
    """
    if not expected_token:
        log.error("APP_SYSTEM_TOKEN is not configured, all %s requests will be rejected", prefix)

    async def gate(request: Request, call_next: CallNext) -> Response:
        path = request.url.path
        if not path.startswith(prefix):
            return await call_next(request)

        provided = request.headers.get(TOKEN_HEADER)
        if provided is None:
            log.warning("Missing %s header: path=%s", TOKEN_HEADER, path)
            return JSONResponse(
                {"error": f"Missing required header: {TOKEN_HEADER}"},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        if not tokens_match(expected_token, provided):
            log.warning("Invalid %s token: path=%s", TOKEN_HEADER, path)
            return JSONResponse(
                {"error": "Invalid system token"},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        return await call_next(request)

    return gate
