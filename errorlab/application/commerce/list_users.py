"""
Use case: List generated users.

Input: ListUsersQuery (limit)
Output: UsersResult
Side effects: One ``users_listed`` telemetry event.
"""

import random

from errorlab.application.commerce.dtos import ListUsersQuery, UsersResult
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.domain.commerce.generators import clamp_count, generate_users

DEFAULT_USER_LIMIT = 10


class ListUsersUseCase:
    """Generates user profiles and records the listing."""

    def __init__(
        self, telemetry: TelemetryPort, rng: random.Random | None = None
    ) -> None:
        self._telemetry = telemetry
        self._rng = rng

    def execute(self, query: ListUsersQuery) -> UsersResult:
        users = generate_users(clamp_count(query.limit, DEFAULT_USER_LIMIT), self._rng)
        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=query.distinct_id,
                event_name="users_listed",
                properties={
                    "endpoint": "/api/users",
                    "user_count": len(users),
                    "request_id": query.context.request_id,
                },
            )
        )
        return UsersResult(users=users)
