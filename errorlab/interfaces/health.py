"""
Health and runtime stats router.

Provides a liveness endpoint and a process metrics snapshot.
No business logic.
"""

import gc
import os
import platform
import sys
import threading
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Request

from errorlab.domain.catalog.entities import RequestContext
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.interfaces.dependencies import get_context, get_settings, get_telemetry
from errorlab.interfaces.schemas import HealthResponse, SuccessEnvelope

try:
    import resource
except ImportError:  # Windows
    resource = None

router = APIRouter(tags=["health"])


def _uptime(request: Request) -> float:
    return round(time.monotonic() - request.app.state.started_at, 3)


def _max_rss_kb() -> int | None:
    if resource is None:
        return None
    usage = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # macOS reports bytes, Linux kilobytes
    return usage // 1024 if sys.platform == "darwin" else usage


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and uptime.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=_uptime(request),
    )


@router.get(
    "/api/stats",
    response_model=SuccessEnvelope[dict[str, Any]],
    summary="Runtime stats",
    description="Returns a snapshot of process and telemetry metrics.",
)
def runtime_stats(
    request: Request,
    context: RequestContext = Depends(get_context),
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> SuccessEnvelope[dict[str, Any]]:
    """Return a process metrics snapshot."""
    settings = get_settings(request)
    data = {
        "service": settings.project_name,
        "version": settings.version,
        "environment": settings.environment,
        "pid": os.getpid(),
        "pythonVersion": platform.python_version(),
        "platform": platform.platform(),
        "uptime": _uptime(request),
        "maxRssKb": _max_rss_kb(),
        "threads": threading.active_count(),
        "gcCounts": list(gc.get_count()),
        "telemetry": telemetry.stats,
    }
    return SuccessEnvelope[dict[str, Any]](data=data, requestId=context.request_id)
