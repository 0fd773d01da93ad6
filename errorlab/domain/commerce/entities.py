"""
Domain entities for the synthetic commerce context.

These records only exist to give analytics events a realistic payload.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Order:
    """A generated order belonging to one user."""

    id: str
    user_id: str
    product_id: str
    quantity: int
    total: float
    status: str
    created_at: datetime


@dataclass(frozen=True)
class User:
    """A generated user profile."""

    id: str
    name: str
    email: str
    plan: str
    created_at: datetime


@dataclass(frozen=True)
class Product:
    """A generated catalog product."""

    id: str
    name: str
    category: str
    price: float
    in_stock: bool
