"""
Telemetry event shaping for simulated errors.

One function builds every error event so resolved errors, batch
errors and unhandled failures share the same property layout.
"""

from typing import Any, Mapping

from errorlab.domain.catalog.entities import (
    ErrorDescriptor,
    RequestContext,
    TelemetryEvent,
)

EXCEPTION_EVENT = "$exception"
EXCEPTION_SOURCE = "backend"


def build_error_event(
    distinct_id: str,
    category: str,
    subtype: str,
    descriptor: ErrorDescriptor,
    context: RequestContext,
    error_name: str | None = None,
    extra: Mapping[str, Any] | None = None,
) -> TelemetryEvent:
    """Build the ``$exception`` event describing one error."""
    name = error_name or descriptor.code
    properties: dict[str, Any] = {
        "$exception_type": name,
        "$exception_message": descriptor.message,
        "$exception_source": EXCEPTION_SOURCE,
        "$exception_fingerprint": f"{name}:{category}:{subtype}",
        "error_name": name,
        "error_type": category,
        "error_subtype": subtype,
        "error_code": descriptor.code,
        "error_message": descriptor.message,
        "http_status": descriptor.http_status,
        "request_id": context.request_id,
    }
    if extra:
        properties.update(extra)
    return TelemetryEvent(
        distinct_id=distinct_id,
        event_name=EXCEPTION_EVENT,
        properties=properties,
    )
