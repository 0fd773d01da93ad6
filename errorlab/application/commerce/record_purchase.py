"""
Use case: Record a purchase.

Input: RecordPurchaseCommand (user_id, product_id, amount)
Output: RecordPurchaseResult with a generated purchase id
Side effects: One ``purchase_completed`` telemetry event.
"""

import logging
from uuid import uuid4

from errorlab.application.commerce.dtos import (
    RecordPurchaseCommand,
    RecordPurchaseResult,
)
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)


class RecordPurchaseUseCase:
    """Creates a purchase id and reports the conversion."""

    def __init__(self, telemetry: TelemetryPort) -> None:
        self._telemetry = telemetry

    def execute(self, command: RecordPurchaseCommand) -> RecordPurchaseResult:
        purchase_id = f"pur_{uuid4().hex[:12]}"
        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=command.user_id,
                event_name="purchase_completed",
                properties={
                    "purchase_id": purchase_id,
                    "product_id": command.product_id,
                    "amount": command.amount,
                    "currency": "USD",
                    "request_id": command.context.request_id,
                },
            )
        )
        logger.info(
            "Purchase %s recorded for user_id=%s", purchase_id, command.user_id
        )
        return RecordPurchaseResult(
            purchase_id=purchase_id,
            user_id=command.user_id,
            product_id=command.product_id,
            amount=command.amount,
        )
