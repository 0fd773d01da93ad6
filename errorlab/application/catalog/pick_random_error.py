"""
Use case: Pick a weighted-random error path to dispatch to.

Input: PickRandomErrorCommand (context)
Output: RandomErrorResult
Side effects: One ``random_error_selected`` telemetry event.
"""

import logging
import random

from errorlab.application.catalog.dtos import (
    PickRandomErrorCommand,
    RandomErrorResult,
)
from errorlab.domain.catalog.entities import RandomRoute, TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.domain.catalog.random_routes import RANDOM_ROUTES, pick_route

logger = logging.getLogger(__name__)

RANDOM_SELECTED_EVENT = "random_error_selected"


class PickRandomErrorUseCase:
    """Selects one of the configured error paths by weight."""

    def __init__(
        self,
        telemetry: TelemetryPort,
        routes: tuple[RandomRoute, ...] = RANDOM_ROUTES,
        rng: random.Random | None = None,
    ) -> None:
        self._telemetry = telemetry
        self._routes = routes
        self._rng = rng

    def execute(self, command: PickRandomErrorCommand) -> RandomErrorResult:
        route = pick_route(self._routes, self._rng)
        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=command.distinct_id,
                event_name=RANDOM_SELECTED_EVENT,
                properties={
                    "path": route.path,
                    "weight": route.weight,
                    "request_id": command.context.request_id,
                },
            )
        )
        logger.info("Random error dispatch -> %s", route.path)
        return RandomErrorResult(path=route.path, weight=route.weight)
