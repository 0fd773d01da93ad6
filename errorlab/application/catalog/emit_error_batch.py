"""
Use case: Emit a batch of simulated error events.

Input: EmitErrorBatchCommand (count, context)
Output: EmitErrorBatchResult
Side effects: ``min(count, max_errors)`` telemetry error events, cycling
    through a fixed list of categories.
"""

import logging

from errorlab.application.catalog.dtos import (
    EmitErrorBatchCommand,
    EmitErrorBatchResult,
    EmittedError,
)
from errorlab.application.catalog.events import build_error_event
from errorlab.domain.catalog.descriptors import get_table
from errorlab.domain.catalog.entities import ErrorCategory
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERRORS = 20
BATCH_SUBTYPE = "batch"

BATCH_CATEGORIES = (
    ErrorCategory.DATABASE,
    ErrorCategory.NETWORK,
    ErrorCategory.AUTH,
    ErrorCategory.BUSINESS,
    ErrorCategory.RESOURCE,
    ErrorCategory.RUNTIME,
    ErrorCategory.ASYNC,
    ErrorCategory.HTTP,
)


class EmitErrorBatchUseCase:
    """Emits up to ``max_errors`` error events in one request."""

    def __init__(
        self, telemetry: TelemetryPort, max_errors: int = DEFAULT_MAX_ERRORS
    ) -> None:
        self._telemetry = telemetry
        self._max_errors = max_errors

    def execute(self, command: EmitErrorBatchCommand) -> EmitErrorBatchResult:
        total = max(0, min(command.count, self._max_errors))
        result = EmitErrorBatchResult(requested=command.count)

        for index in range(total):
            category = BATCH_CATEGORIES[index % len(BATCH_CATEGORIES)]
            descriptor = get_table(category).default
            self._telemetry.capture(
                build_error_event(
                    distinct_id=command.distinct_id,
                    category=category.value,
                    subtype=BATCH_SUBTYPE,
                    descriptor=descriptor,
                    context=command.context,
                    extra={"batch_index": index, "batch_size": total},
                )
            )
            result.emitted.append(
                EmittedError(
                    category=category.value,
                    code=descriptor.code,
                    http_status=descriptor.http_status,
                )
            )

        logger.info(
            "Emitted %d error event(s) (requested=%d)", total, command.count
        )
        return result
