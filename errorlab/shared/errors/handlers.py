"""
Centralized error handlers for FastAPI.

Maps framework and service errors to the standard error envelope.
No stack traces or internal details are exposed to clients.
Genuinely unexpected errors are reported to telemetry as ``unhandled``.
"""

import logging
import traceback
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from errorlab.application.catalog.events import build_error_event
from errorlab.domain.catalog.entities import ErrorDescriptor
from errorlab.domain.catalog.errors import CatalogDomainError
from errorlab.shared.errors.envelope import error_response
from errorlab.shared.middleware.request_context import get_request_context

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

UNHANDLED_CATEGORY = "unhandled"
UNHANDLED_SUBTYPE = "uncaught_exception"
UNHANDLED_DESCRIPTOR = ErrorDescriptor(
    code="INTERNAL_SERVER_ERROR",
    http_status=HTTP_500,
    message="Internal server error",
)


def _status_code_name(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return "HTTP_ERROR"


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log, report and answer an exception that no route handled.

    The client only ever sees the generic 500 envelope.
    """
    logger.exception("Unexpected error: %s", type(exc).__name__)
    context = get_request_context(request)

    telemetry = getattr(request.app.state, "telemetry", None)
    if telemetry is not None:
        telemetry.capture(
            build_error_event(
                distinct_id=request.headers.get("X-User-Id") or "system",
                category=UNHANDLED_CATEGORY,
                subtype=UNHANDLED_SUBTYPE,
                descriptor=UNHANDLED_DESCRIPTOR,
                context=context,
                error_name=type(exc).__name__,
                extra={
                    "$exception_message": str(exc),
                    "error_stack": "".join(traceback.format_exception(exc)),
                    "request_url": request.url.path,
                    "request_method": request.method,
                },
            )
        )

    return error_response(
        HTTP_500,
        code=UNHANDLED_DESCRIPTOR.code,
        error_type=UNHANDLED_CATEGORY,
        message=UNHANDLED_DESCRIPTOR.message,
        request_id=context.request_id,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle unmatched routes and explicit HTTP errors."""
        context = get_request_context(request)
        if exc.status_code == HTTP_404:
            logger.info("Endpoint not found: %s %s", request.method, request.url.path)
            return error_response(
                HTTP_404,
                code="NOT_FOUND",
                error_type="not_found",
                message="Endpoint not found",
                request_id=context.request_id,
            )
        return error_response(
            exc.status_code,
            code=_status_code_name(exc.status_code),
            error_type="http",
            message=str(exc.detail),
            request_id=context.request_id,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and query parameters."""
        context = get_request_context(request)
        logger.warning("Invalid request on %s", request.url.path)
        return error_response(
            HTTP_422,
            code="INVALID_REQUEST",
            error_type="request",
            message="Request parameters failed validation",
            request_id=context.request_id,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for catalog domain errors."""
        logger.error("Catalog domain error: %s", exc.message)
        context = get_request_context(request)
        return error_response(
            HTTP_500,
            code=UNHANDLED_DESCRIPTOR.code,
            error_type="catalog",
            message=UNHANDLED_DESCRIPTOR.message,
            request_id=context.request_id,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Last resort for failures raised outside the middleware stack."""
        return unhandled_error_response(request, exc)
