"""
Use case: Resolve a simulated error into a descriptor and telemetry event.

Input: ResolveErrorCommand (category, subtype, context)
Output: ResolvedError
Side effects: Exactly one telemetry event is captured.
Failure cases: None for categories with a descriptor table. Unknown
    subtypes fall back to the category default.
"""

import logging

from errorlab.application.catalog.dtos import ResolveErrorCommand, ResolvedError
from errorlab.application.catalog.events import build_error_event
from errorlab.domain.catalog.descriptors import lookup
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)


class ResolveErrorUseCase:
    """Looks up canned error metadata and reports it to telemetry."""

    def __init__(self, telemetry: TelemetryPort) -> None:
        self._telemetry = telemetry

    def execute(self, command: ResolveErrorCommand) -> ResolvedError:
        """Run the resolve use case.

        Args:
            command: The category/subtype pair and request context.

        Returns:
            The resolved error with its status, descriptor and event.
        """
        category = command.category.value
        descriptor = lookup(command.category, command.subtype)

        extra = None
        if command.details:
            extra = {"error_details": dict(command.details)}

        event = build_error_event(
            distinct_id=command.distinct_id,
            category=category,
            subtype=command.subtype,
            descriptor=descriptor,
            context=command.context,
            error_name=command.error_name,
            extra=extra,
        )
        self._telemetry.capture(event)

        logger.info(
            "Simulated error category=%s subtype=%s code=%s status=%d request_id=%s",
            category,
            command.subtype,
            descriptor.code,
            descriptor.http_status,
            command.context.request_id,
        )

        return ResolvedError(
            http_status=descriptor.http_status,
            descriptor=descriptor,
            event=event,
            category=command.category,
            subtype=command.subtype,
            request_id=command.context.request_id,
            timestamp=event.timestamp,
            details=command.details,
        )
