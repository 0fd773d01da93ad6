"""
Pydantic schemas for the simulated error endpoints.

The validation record is deliberately loose: every field accepts any
JSON value so that malformed input reaches the collect-all validator
instead of being rejected by request parsing.
"""

from typing import Any

from pydantic import BaseModel, Field


class ValidationRecordRequest(BaseModel):
    """Request schema for POST /api/error/validation."""

    email: Any = None
    password: Any = None
    age: Any = None
    phone: Any = None
    username: Any = None


class BatchErrorsRequest(BaseModel):
    """Request schema for POST /api/batch-errors.

    Attributes:
        count: Number of error events requested (capped server-side).
    """

    count: int = Field(default=5, ge=0, description="Requested error events")


class EmittedErrorItem(BaseModel):
    type: str
    code: str
    status: int


class BatchErrorsData(BaseModel):
    requested: int
    errorsSent: int
    errors: list[EmittedErrorItem]
