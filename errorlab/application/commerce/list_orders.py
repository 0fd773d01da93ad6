"""
Use case: List generated orders for a user.

Input: ListOrdersQuery (user_id, count)
Output: OrdersResult
Side effects: One ``orders_viewed`` telemetry event.
"""

import logging
import random

from errorlab.application.commerce.dtos import ListOrdersQuery, OrdersResult
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.domain.commerce.generators import clamp_count, generate_orders

logger = logging.getLogger(__name__)

DEFAULT_ORDER_COUNT = 3


class ListOrdersUseCase:
    """Generates a user's orders and records the view."""

    def __init__(
        self, telemetry: TelemetryPort, rng: random.Random | None = None
    ) -> None:
        self._telemetry = telemetry
        self._rng = rng

    def execute(self, query: ListOrdersQuery) -> OrdersResult:
        count = clamp_count(query.count, DEFAULT_ORDER_COUNT)
        orders = generate_orders(query.user_id, count, self._rng)

        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=query.user_id,
                event_name="orders_viewed",
                properties={
                    "endpoint": "/api/orders",
                    "order_count": len(orders),
                    "request_id": query.context.request_id,
                },
            )
        )
        logger.debug("Generated %d orders for user=%s", len(orders), query.user_id)
        return OrdersResult(user_id=query.user_id, orders=orders)
