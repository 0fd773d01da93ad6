"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, simulated errors, synthetic commerce)
- Error handlers (centralized error-to-envelope mapping)
- Middleware (request context, CORS, security headers, rate limiting, unhandled errors)
- Logging configuration
- Telemetry adapter lifecycle (open on startup, flush and close on shutdown)

No business logic belongs here.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from errorlab.core.config import Settings, settings as default_settings
from errorlab.domain.catalog.descriptors import validate_catalog
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.infrastructure.telemetry.posthog_adapter import PostHogTelemetryAdapter
from errorlab.interfaces.commerce.router import router as commerce_router
from errorlab.interfaces.errors.router import router as errors_router
from errorlab.interfaces.health import router as health_router
from errorlab.shared.errors.handlers import register_error_handlers
from errorlab.shared.logging import configure_logging
from errorlab.shared.middleware.request_context import RequestContextMiddleware
from errorlab.shared.middleware.unhandled_errors import UnhandledErrorMiddleware
from errorlab.shared.security.headers import DOCS_PATHS, SecurityHeadersMiddleware
from errorlab.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def build_telemetry(settings: Settings) -> TelemetryPort:
    """Build the PostHog adapter from settings."""
    return PostHogTelemetryAdapter(
        project_key=settings.posthog_project_key,
        host=settings.posthog_host,
        environment=settings.environment,
        flush_at=settings.posthog_flush_at,
        flush_interval=settings.posthog_flush_interval,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the telemetry sink, then flush it on shutdown."""
    telemetry: TelemetryPort = app.state.telemetry
    telemetry.open()
    logger.info(
        "%s %s started (telemetry %s)",
        app.state.settings.project_name,
        app.state.settings.version,
        "enabled" if telemetry.enabled else "disabled",
    )

    yield

    logger.info("Shutting down gracefully...")
    telemetry.flush()
    telemetry.close()


def create_app(
    settings: Settings | None = None,
    telemetry: TelemetryPort | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment settings.
        telemetry: Telemetry adapter to use. Defaults to PostHog.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        CatalogConfigurationError: If a descriptor table is malformed.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)
    validate_catalog()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.telemetry = telemetry or build_telemetry(settings)
    app.state.started_at = time.monotonic()

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        SecurityHeadersMiddleware,
        csp_exempt_paths=DOCS_PATHS if settings.debug else (),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-User-Id"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(errors_router)
    app.include_router(commerce_router)

    return app


app = create_app()
