"""
Standard JSON envelopes.

Every failure answers with ``{success: false, error: {...}}``.
"""

from datetime import datetime, timezone
from typing import Any, Mapping

from fastapi.responses import JSONResponse


def _iso(timestamp: datetime | None) -> str:
    return (timestamp or datetime.now(timezone.utc)).isoformat()


def error_envelope(
    code: str,
    error_type: str,
    message: str,
    request_id: str | None,
    timestamp: datetime | None = None,
    subtype: str | None = None,
    details: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the ``{success: false, error: {...}}`` body."""
    error: dict[str, Any] = {
        "code": code,
        "type": error_type,
        "message": message,
        "requestId": request_id,
        "timestamp": _iso(timestamp),
    }
    if subtype is not None:
        error["subtype"] = subtype
    if details:
        error["details"] = dict(details)
    return {"success": False, "error": error}


def error_response(status_code: int, **kwargs: Any) -> JSONResponse:
    """Build a JSON error response with the standard envelope."""
    return JSONResponse(status_code=status_code, content=error_envelope(**kwargs))
