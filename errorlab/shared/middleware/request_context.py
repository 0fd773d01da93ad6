"""
Request context middleware.

Creates a RequestContext for every inbound request, attaches it to
``request.state.context``, echoes its id in the ``X-Request-ID``
response header and logs one line per request with its duration.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from errorlab.domain.catalog.entities import RequestContext

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_context(request: Request) -> RequestContext:
    """Return the context attached by the middleware, creating one if absent."""
    context = getattr(request.state, "context", None)
    if context is None:
        context = RequestContext()
        request.state.context = context
    return context


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches a RequestContext and logs the request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Attach the context, run the request and log the outcome."""
        context = get_request_context(request)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = context.request_id
        logger.info(
            "%s %s - %d (%.0fms)",
            request.method,
            request.url.path,
            response.status_code,
            context.elapsed_ms(),
        )
        return response
