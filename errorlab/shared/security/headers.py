"""
Secure HTTP headers middleware.

Adds restrictive headers to every response. Simulated and genuine
error responses are additionally marked ``no-store`` so a browser or
proxy never replays a stale error to the dashboard.
"""

from typing import Iterable, Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}
CSP_HEADER = "Content-Security-Policy"
ERROR_CACHE_CONTROL = "no-store"
# Swagger UI and ReDoc pull their assets from a CDN
DOCS_PATHS = ("/docs", "/redoc")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Args:
        app: The wrapped ASGI application.
        headers: Headers to add when the response does not set them.
        csp_exempt_paths: Path prefixes served without a CSP header.
    """

    def __init__(
        self,
        app: ASGIApp,
        headers: Mapping[str, str] = SECURE_HEADERS,
        csp_exempt_paths: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self._headers = dict(headers)
        self._csp_exempt_paths = tuple(csp_exempt_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        csp_exempt = request.url.path.startswith(self._csp_exempt_paths)
        for header_name, header_value in self._headers.items():
            if header_name == CSP_HEADER and csp_exempt:
                continue
            response.headers.setdefault(header_name, header_value)
        if response.status_code >= 400:
            response.headers["Cache-Control"] = ERROR_CACHE_CONTROL
        return response
