"""
Data Transfer Objects for the error catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from errorlab.domain.catalog.entities import (
    ErrorCategory,
    ErrorDescriptor,
    RequestContext,
    TelemetryEvent,
)

SYSTEM_DISTINCT_ID = "system"


@dataclass(frozen=True)
class ResolveErrorCommand:
    """Input DTO for resolving a simulated error.

    Attributes:
        category: Error category.
        subtype: Untrusted subtype string taken from the request path.
        context: The current request context.
        distinct_id: Analytics identity the event is attributed to.
        error_name: Exception type name reported to telemetry.
            Defaults to the descriptor code.
        details: Extra material echoed in the response and the event.
    """

    category: ErrorCategory
    subtype: str
    context: RequestContext
    distinct_id: str = SYSTEM_DISTINCT_ID
    error_name: str | None = None
    details: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResolvedError:
    """Output DTO for a resolved simulated error.

    Attributes:
        http_status: Status code to answer with.
        descriptor: The matched (or default) descriptor.
        event: The telemetry event that was emitted.
        category: Error category.
        subtype: Subtype as requested.
        request_id: Identifier of the originating request.
        timestamp: When the error was resolved.
        details: Extra material for the response, if any.
    """

    http_status: int
    descriptor: ErrorDescriptor
    event: TelemetryEvent
    category: ErrorCategory
    subtype: str
    request_id: str
    timestamp: datetime
    details: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ValidateRecordCommand:
    """Input DTO for the collect-all validator."""

    record: Mapping[str, Any]
    context: RequestContext
    distinct_id: str = SYSTEM_DISTINCT_ID


@dataclass(frozen=True)
class TriggerFaultCommand:
    """Input DTO for the runtime and async fault categories."""

    category: ErrorCategory
    subtype: str
    context: RequestContext
    distinct_id: str = SYSTEM_DISTINCT_ID


@dataclass(frozen=True)
class PickRandomErrorCommand:
    """Input DTO for weighted random error selection."""

    context: RequestContext
    distinct_id: str = SYSTEM_DISTINCT_ID


@dataclass(frozen=True)
class RandomErrorResult:
    """Output DTO naming the error path that was picked."""

    path: str
    weight: int


@dataclass(frozen=True)
class EmitErrorBatchCommand:
    """Input DTO for emitting a batch of simulated error events."""

    count: int
    context: RequestContext
    distinct_id: str = SYSTEM_DISTINCT_ID


@dataclass(frozen=True)
class EmittedError:
    """One error event emitted by a batch."""

    category: str
    code: str
    http_status: int


@dataclass(frozen=True)
class EmitErrorBatchResult:
    """Output DTO for an error batch."""

    requested: int
    emitted: list[EmittedError] = field(default_factory=list)
