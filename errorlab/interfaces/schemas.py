"""
Pydantic schemas shared by every router.

Defines the success envelope and the error envelope used in
OpenAPI ``responses`` declarations.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessEnvelope(BaseModel, Generic[T]):
    """Standard success wrapper: ``{success, data, requestId}``."""

    success: bool = True
    data: T
    requestId: str


class ErrorBody(BaseModel):
    """The ``error`` member of the error envelope."""

    code: str
    type: str
    message: str
    requestId: str | None
    timestamp: str
    subtype: str | None = None
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error wrapper: ``{success: false, error}``."""

    success: bool = False
    error: ErrorBody


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    timestamp: str
    uptime: float
