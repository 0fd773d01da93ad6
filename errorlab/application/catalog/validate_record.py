"""
Use case: Validate a submitted record and report every violation.

Input: ValidateRecordCommand (record, context)
Output: ResolvedError whose details hold the violation list
Side effects: One telemetry event via ResolveErrorUseCase.
"""

import logging

from errorlab.application.catalog.dtos import (
    ResolveErrorCommand,
    ResolvedError,
    ValidateRecordCommand,
)
from errorlab.application.catalog.resolve_error import ResolveErrorUseCase
from errorlab.domain.catalog.entities import ErrorCategory
from errorlab.domain.catalog.validation import collect_violations

logger = logging.getLogger(__name__)

SUBTYPE = "fields"


class ValidateRecordUseCase:
    """Runs the collect-all validator and resolves the validation error."""

    def __init__(self, resolve_error: ResolveErrorUseCase) -> None:
        self._resolve_error = resolve_error

    def execute(self, command: ValidateRecordCommand) -> ResolvedError:
        violations = collect_violations(command.record)
        logger.debug("Validation produced %d violation(s)", len(violations))

        return self._resolve_error.execute(
            ResolveErrorCommand(
                category=ErrorCategory.VALIDATION,
                subtype=SUBTYPE,
                context=command.context,
                distinct_id=command.distinct_id,
                details={
                    "violations": [
                        {"field": v.field, "message": v.message}
                        for v in violations
                    ]
                },
            )
        )
