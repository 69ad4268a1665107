"""
Rate limiting configuration and setup.

Uses slowapi, keyed by client address. The sign-up endpoint carries its
own, stricter limit (``settings.rate_limit_signup``).
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer throttled requests with a 429 JSON error.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.
    """
    logger.warning(
        "Rate limit exceeded on %s from %s", request.url.path, get_remote_address(request)
    )
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
