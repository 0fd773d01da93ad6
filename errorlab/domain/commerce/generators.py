"""
Synthetic data generators for orders, users and products.

All generators accept an optional ``random.Random`` so tests can seed them.
"""

import random
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from errorlab.domain.commerce.entities import Order, Product, User

MAX_ITEMS = 50

ORDER_STATUSES = ("pending", "paid", "shipped", "delivered", "cancelled")
PLANS = ("free", "starter", "pro", "enterprise")
PRODUCT_CATEGORIES = ("electronics", "books", "clothing", "home", "sports")
FIRST_NAMES = ("Amira", "Omar", "Lina", "Youssef", "Sara", "Karim", "Nour", "Adam")
LAST_NAMES = ("Haddad", "Nasser", "Khalil", "Saleh", "Mansour", "Aziz")
PRODUCT_ADJECTIVES = ("Classic", "Smart", "Compact", "Premium", "Eco", "Ultra")
PRODUCT_NOUNS = {
    "electronics": ("Headphones", "Charger", "Speaker", "Monitor"),
    "books": ("Novel", "Cookbook", "Atlas", "Guide"),
    "clothing": ("Jacket", "Sneakers", "Scarf", "Hoodie"),
    "home": ("Lamp", "Kettle", "Blanket", "Chair"),
    "sports": ("Racket", "Yoga Mat", "Bottle", "Backpack"),
}


def clamp_count(value: int | None, default: int) -> int:
    """Clamp a requested item count to [0, MAX_ITEMS]."""
    if value is None:
        return default
    return max(0, min(value, MAX_ITEMS))


def _short_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:10]}"


def _recent(rng: random.Random, max_days: int = 90) -> datetime:
    offset = timedelta(minutes=rng.randint(0, max_days * 24 * 60))
    return datetime.now(timezone.utc) - offset


def generate_orders(
    user_id: str, count: int, rng: random.Random | None = None
) -> list[Order]:
    """Generate ``count`` orders for a user."""
    rng = rng or random.Random()
    orders = []
    for _ in range(count):
        quantity = rng.randint(1, 5)
        unit_price = rng.uniform(5, 250)
        orders.append(
            Order(
                id=_short_id("ord"),
                user_id=user_id,
                product_id=_short_id("prod"),
                quantity=quantity,
                total=round(quantity * unit_price, 2),
                status=rng.choice(ORDER_STATUSES),
                created_at=_recent(rng),
            )
        )
    return orders


def generate_users(limit: int, rng: random.Random | None = None) -> list[User]:
    """Generate ``limit`` user profiles."""
    rng = rng or random.Random()
    users = []
    for _ in range(limit):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        user_id = _short_id("user")
        users.append(
            User(
                id=user_id,
                name=f"{first} {last}",
                email=f"{first.lower()}.{last.lower()}.{user_id[-4:]}@example.com",
                plan=rng.choice(PLANS),
                created_at=_recent(rng, max_days=365),
            )
        )
    return users


def generate_products(
    category: str | None, limit: int, rng: random.Random | None = None
) -> list[Product]:
    """Generate ``limit`` products, all in ``category`` when one is given.

    Unknown categories are kept as-is and use a generic product noun.
    """
    rng = rng or random.Random()
    products = []
    for _ in range(limit):
        product_category = category or rng.choice(PRODUCT_CATEGORIES)
        nouns = PRODUCT_NOUNS.get(product_category, ("Item",))
        products.append(
            Product(
                id=_short_id("prod"),
                name=f"{rng.choice(PRODUCT_ADJECTIVES)} {rng.choice(nouns)}",
                category=product_category,
                price=round(rng.uniform(3, 500), 2),
                in_stock=rng.random() > 0.15,
            )
        )
    return products
