"""
Data Transfer Objects for the synthetic commerce application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from errorlab.domain.catalog.entities import RequestContext
from errorlab.domain.commerce.entities import Order, Product, User


@dataclass(frozen=True)
class ListOrdersQuery:
    """Input DTO for listing generated orders.

    Attributes:
        user_id: Owner of the orders, also the analytics identity.
        count: Requested number of orders (clamped).
        context: The current request context.
    """

    user_id: str
    count: int | None
    context: RequestContext


@dataclass(frozen=True)
class ListUsersQuery:
    """Input DTO for listing generated users."""

    distinct_id: str
    limit: int | None
    context: RequestContext


@dataclass(frozen=True)
class ListProductsQuery:
    """Input DTO for listing generated products."""

    distinct_id: str
    category: str | None
    limit: int | None
    context: RequestContext


@dataclass(frozen=True)
class OrdersResult:
    user_id: str
    orders: list[Order]


@dataclass(frozen=True)
class UsersResult:
    users: list[User]


@dataclass(frozen=True)
class ProductsResult:
    category: str | None
    products: list[Product]


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering a user.

    Attributes:
        name: Display name.
        email: Contact email.
        context: The current request context.
    """

    name: str
    email: str
    context: RequestContext


@dataclass(frozen=True)
class RegisterUserResult:
    user_id: str
    name: str
    email: str


@dataclass(frozen=True)
class RecordPurchaseCommand:
    """Input DTO for recording a purchase.

    Attributes:
        user_id: Buyer identity.
        product_id: Purchased product.
        amount: Purchase amount.
        context: The current request context.
    """

    user_id: str
    product_id: str
    amount: float
    context: RequestContext


@dataclass(frozen=True)
class RecordPurchaseResult:
    purchase_id: str
    user_id: str
    product_id: str
    amount: float


@dataclass(frozen=True)
class EmitEventBatchCommand:
    """Input DTO for emitting a batch of analytics events."""

    count: int
    event_type: str
    context: RequestContext


@dataclass(frozen=True)
class EmitEventBatchResult:
    requested: int
    events_sent: int
    event_type: str


@dataclass(frozen=True)
class SimulateDelayCommand:
    """Input DTO for the slow endpoint."""

    requested_ms: int
    context: RequestContext


@dataclass(frozen=True)
class SimulateDelayResult:
    requested_ms: int
    delay_ms: int
