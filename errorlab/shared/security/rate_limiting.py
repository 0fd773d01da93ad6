"""
Rate limiting configuration and setup.

Uses slowapi to enforce rate limits. ``SlowAPIMiddleware`` applies the
default limit to every undecorated route; the batch endpoints carry the
stricter heavy limit, since they fan out into many telemetry events per
request.

Limits are read from the environment settings once at import, because
the route decorators bind them when the routers are defined.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from errorlab.core.config import settings
from errorlab.shared.errors.envelope import error_response
from errorlab.shared.middleware.request_context import get_request_context

DEFAULT_RATE_LIMIT = settings.rate_limit_default
HEAVY_RATE_LIMIT = settings.rate_limit_heavy

limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Synchronous, so ``SlowAPIMiddleware`` calls it instead of falling
    back to slowapi's own handler.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    context = get_request_context(request)
    return error_response(
        429,
        code="RATE_LIMIT_EXCEEDED",
        error_type="rate_limit",
        message=f"Rate limit exceeded: {exc.detail}",
        request_id=context.request_id,
    )
