"""
Use case: Suspend the current request for a bounded delay.

Input: SimulateDelayCommand (requested_ms)
Output: SimulateDelayResult with the delay actually applied
Side effects: One ``slow_request`` telemetry event.
Only the calling request is suspended; the event loop keeps serving others.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from errorlab.application.commerce.dtos import (
    SimulateDelayCommand,
    SimulateDelayResult,
)
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_DELAY_MS = 10_000


class SimulateDelayUseCase:
    """Sleeps for ``min(requested, max_delay_ms)`` milliseconds."""

    def __init__(
        self,
        telemetry: TelemetryPort,
        max_delay_ms: int = DEFAULT_MAX_DELAY_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._telemetry = telemetry
        self._max_delay_ms = max_delay_ms
        self._sleep = sleep

    async def execute(self, command: SimulateDelayCommand) -> SimulateDelayResult:
        delay_ms = max(0, min(command.requested_ms, self._max_delay_ms))
        if delay_ms != command.requested_ms:
            logger.info(
                "Requested delay %dms clamped to %dms", command.requested_ms, delay_ms
            )

        await self._sleep(delay_ms / 1000)

        self._telemetry.capture(
            TelemetryEvent(
                distinct_id="system",
                event_name="slow_request",
                properties={
                    "ms": delay_ms,
                    "requested_ms": command.requested_ms,
                    "request_id": command.context.request_id,
                },
            )
        )
        return SimulateDelayResult(requested_ms=command.requested_ms, delay_ms=delay_ms)
