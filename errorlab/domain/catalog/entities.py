"""
Domain entities for the error catalog bounded context.

Entities describe simulated errors, the requests that trigger them,
and the telemetry events they produce.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping
from uuid import uuid4


class ErrorCategory(Enum):
    """Taxonomy of simulated errors."""

    HTTP = "http"
    RUNTIME = "runtime"
    ASYNC = "async"
    DATABASE = "database"
    NETWORK = "network"
    AUTH = "auth"
    BUSINESS = "business"
    RESOURCE = "resource"
    VALIDATION = "validation"
    RANDOM = "random"


@dataclass(frozen=True)
class ErrorDescriptor:
    """Canned metadata for one simulated error.

    Attributes:
        code: Symbolic error code (e.g. DB_DEADLOCK).
        http_status: HTTP status code returned to the client.
        message: Human readable message.
    """

    code: str
    http_status: int
    message: str


@dataclass(frozen=True)
class CategoryTable:
    """Static subtype -> descriptor mapping for one category."""

    category: ErrorCategory
    entries: Mapping[str, ErrorDescriptor]
    default: ErrorDescriptor

    def lookup(self, subtype: str) -> ErrorDescriptor:
        """Return the descriptor for a subtype, or the category default."""
        return self.entries.get(subtype, self.default)


def _new_request_id() -> str:
    return f"req_{uuid4().hex[:16]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RequestContext:
    """Per-request identity, discarded once the response is sent."""

    request_id: str = field(default_factory=_new_request_id)
    start_time: datetime = field(default_factory=_utcnow)

    def elapsed_ms(self) -> float:
        return (_utcnow() - self.start_time).total_seconds() * 1000


@dataclass(frozen=True)
class TelemetryEvent:
    """A named fact with properties, sent once to the telemetry sink."""

    distinct_id: str
    event_name: str
    properties: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties))
        )


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation failure."""

    field: str
    message: str


@dataclass(frozen=True)
class RandomRoute:
    """One entry of the weighted random error table."""

    path: str
    weight: int
