"""
Weighted random selection over the configured error paths.
"""

import random
from typing import Sequence

from errorlab.domain.catalog.entities import RandomRoute

RANDOM_ROUTES: tuple[RandomRoute, ...] = (
    RandomRoute("/api/error/http/500", 15),
    RandomRoute("/api/error/http/404", 15),
    RandomRoute("/api/error/runtime/type", 10),
    RandomRoute("/api/error/async/rejected", 10),
    RandomRoute("/api/error/database/connection", 10),
    RandomRoute("/api/error/network/timeout", 10),
    RandomRoute("/api/error/auth/unauthorized", 10),
    RandomRoute("/api/error/business/insufficient_funds", 8),
    RandomRoute("/api/error/resource/memory", 7),
    RandomRoute("/api/error/http/503", 5),
)


def pick_route(
    routes: Sequence[RandomRoute] = RANDOM_ROUTES,
    rng: random.Random | None = None,
) -> RandomRoute:
    """Pick one route with probability proportional to its weight."""
    if not routes:
        raise ValueError("At least one route is required")
    chooser = rng or random
    return chooser.choices(routes, weights=[r.weight for r in routes], k=1)[0]
