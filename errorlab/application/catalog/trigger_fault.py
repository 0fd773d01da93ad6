"""
Use case: Trigger a simulated runtime or async fault and resolve it.

Input: TriggerFaultCommand (category, subtype, context)
Output: ResolvedError whose details hold the fault name, message and stack
Side effects: One telemetry event via ResolveErrorUseCase.
Failure cases: None. The fault is raised and caught inside the use case.
"""

import logging
import traceback

from errorlab.application.catalog.dtos import (
    ResolveErrorCommand,
    ResolvedError,
    TriggerFaultCommand,
)
from errorlab.application.catalog.resolve_error import ResolveErrorUseCase
from errorlab.domain.catalog.entities import ErrorCategory
from errorlab.domain.catalog.faults import (
    SimulatedFault,
    SimulatedFaultError,
    raise_fault,
    run_async_fault,
)

logger = logging.getLogger(__name__)

FAULT_CATEGORIES = (ErrorCategory.RUNTIME, ErrorCategory.ASYNC)


class TriggerFaultUseCase:
    """Raises a tagged fault through a real call stack and reports it."""

    def __init__(self, resolve_error: ResolveErrorUseCase) -> None:
        self._resolve_error = resolve_error

    async def execute(self, command: TriggerFaultCommand) -> ResolvedError:
        """Run the fault scenario for the requested subtype.

        Args:
            command: Category (runtime or async), subtype and context.

        Returns:
            The resolved error with the captured fault in ``details``.

        Raises:
            ValueError: If the category is not runtime or async.
        """
        if command.category not in FAULT_CATEGORIES:
            raise ValueError(f"Not a fault category: {command.category.value}")

        fault = SimulatedFault.for_subtype(command.category, command.subtype)
        try:
            if command.category is ErrorCategory.ASYNC:
                await run_async_fault(fault)
            else:
                raise_fault(fault)
        except SimulatedFaultError as exc:
            details = _describe(exc)
        else:
            raise RuntimeError(f"Fault {fault.name} did not raise")

        logger.debug("Captured simulated fault %s", details["errorName"])

        return self._resolve_error.execute(
            ResolveErrorCommand(
                category=command.category,
                subtype=command.subtype,
                context=command.context,
                distinct_id=command.distinct_id,
                error_name=details["errorName"],
                details=details,
            )
        )


def _describe(exc: SimulatedFaultError) -> dict:
    details = {
        "errorName": exc.error_name,
        "message": exc.message,
        "stack": "".join(traceback.format_exception(exc)),
    }
    cause = exc.__cause__
    if cause is not None:
        details["cause"] = f"{type(cause).__name__}: {cause}"
    return details
