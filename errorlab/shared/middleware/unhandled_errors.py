"""
Unhandled error middleware.

Installed innermost, so the generic 500 envelope for an exception no
route handled still travels back out through the security headers,
CORS and request context middleware.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from errorlab.shared.errors.handlers import unhandled_error_response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Middleware that turns uncaught exceptions into the 500 envelope."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return unhandled_error_response(request, exc)
