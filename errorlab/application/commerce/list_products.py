"""
Use case: List generated products, optionally within one category.

Input: ListProductsQuery (category, limit)
Output: ProductsResult
Side effects: One ``products_viewed`` telemetry event.
"""

import random

from errorlab.application.commerce.dtos import ListProductsQuery, ProductsResult
from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.domain.commerce.generators import clamp_count, generate_products

DEFAULT_PRODUCT_LIMIT = 10


class ListProductsUseCase:
    """Generates catalog products and records the view."""

    def __init__(
        self, telemetry: TelemetryPort, rng: random.Random | None = None
    ) -> None:
        self._telemetry = telemetry
        self._rng = rng

    def execute(self, query: ListProductsQuery) -> ProductsResult:
        limit = clamp_count(query.limit, DEFAULT_PRODUCT_LIMIT)
        products = generate_products(query.category, limit, self._rng)
        self._telemetry.capture(
            TelemetryEvent(
                distinct_id=query.distinct_id,
                event_name="products_viewed",
                properties={
                    "endpoint": "/api/products",
                    "category": query.category or "all",
                    "product_count": len(products),
                    "request_id": query.context.request_id,
                },
            )
        )
        return ProductsResult(category=query.category, products=products)
