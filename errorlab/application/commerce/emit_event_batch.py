"""
Use case: Emit a batch of analytics events.

Input: EmitEventBatchCommand (count, event_type)
Output: EmitEventBatchResult
Side effects: ``min(count, max_events)`` telemetry events spread over a
    small pool of synthetic identities.
"""

import logging

from errorlab.application.commerce.dtos import (
    EmitEventBatchCommand,
    EmitEventBatchResult,
)
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_EVENTS = 100
BATCH_USER_POOL = 10


class EmitEventBatchUseCase:
    """Emits up to ``max_events`` events in one request."""

    def __init__(
        self, telemetry: TelemetryPort, max_events: int = DEFAULT_MAX_EVENTS
    ) -> None:
        self._telemetry = telemetry
        self._max_events = max_events

    def execute(self, command: EmitEventBatchCommand) -> EmitEventBatchResult:
        total = max(0, min(command.count, self._max_events))
        for index in range(total):
            self._telemetry.capture(
                TelemetryEvent(
                    distinct_id=f"batch_user_{index % BATCH_USER_POOL}",
                    event_name=command.event_type,
                    properties={
                        "batch_index": index,
                        "batch_size": total,
                        "request_id": command.context.request_id,
                    },
                )
            )
        logger.info(
            "Emitted %d '%s' event(s) (requested=%d)",
            total,
            command.event_type,
            command.count,
        )
        return EmitEventBatchResult(
            requested=command.count, events_sent=total, event_type=command.event_type
        )
