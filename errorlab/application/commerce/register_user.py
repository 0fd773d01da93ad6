"""
Use case: Register a user.

Input: RegisterUserCommand (name, email)
Output: RegisterUserResult with a generated user id
Side effects: One ``user_signed_up`` event that also sets person
    properties on the new identity.
"""

import logging
from uuid import uuid4

from errorlab.application.commerce.dtos import (
    RegisterUserCommand,
    RegisterUserResult,
)
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Creates a user id and identifies it in telemetry."""

    def __init__(self, telemetry: TelemetryPort) -> None:
        self._telemetry = telemetry

    def execute(self, command: RegisterUserCommand) -> RegisterUserResult:
        user_id = f"user_{uuid4().hex[:12]}"
        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=user_id,
                event_name="user_signed_up",
                properties={
                    "$set": {"name": command.name, "email": command.email},
                    "signup_method": "api",
                    "request_id": command.context.request_id,
                },
            )
        )
        logger.info("Registered user_id=%s", user_id)
        return RegisterUserResult(
            user_id=user_id, name=command.name, email=command.email
        )
