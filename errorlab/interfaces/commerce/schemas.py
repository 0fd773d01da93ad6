"""
Pydantic schemas for the synthetic commerce API.

These schemas enforce input validation and define the API contract.
Request bodies use the camelCase names of the public API.
No business logic belongs here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class OrderItem(BaseModel):
    id: str
    userId: str
    productId: str
    quantity: int
    total: float
    status: str
    createdAt: datetime


class OrdersData(BaseModel):
    userId: str
    count: int
    orders: list[OrderItem]


class UserItem(BaseModel):
    id: str
    name: str
    email: str
    plan: str
    createdAt: datetime


class UsersData(BaseModel):
    count: int
    users: list[UserItem]


class ProductItem(BaseModel):
    id: str
    name: str
    category: str
    price: float
    inStock: bool


class ProductsData(BaseModel):
    category: str | None
    count: int
    products: list[ProductItem]


class SlowData(BaseModel):
    requested: int
    delay: int


class RegisterRequest(BaseModel):
    """Request schema for POST /api/register.

    Attributes:
        name: Display name (1-100 chars).
        email: Contact email address.
    """

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)


class RegisterData(BaseModel):
    userId: str
    name: str
    email: str


class PurchaseRequest(BaseModel):
    """Request schema for POST /api/purchase.

    Attributes:
        user_id: Buyer identity (``userId`` in JSON).
        product_id: Purchased product (``productId`` in JSON).
        amount: Strictly positive purchase amount.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)
    product_id: str = Field(..., alias="productId", min_length=1)
    amount: float = Field(..., gt=0)


class PurchaseData(BaseModel):
    purchaseId: str
    userId: str
    productId: str
    amount: float


class BatchEventsRequest(BaseModel):
    """Request schema for POST /api/batch-events.

    Attributes:
        count: Number of events requested (capped server-side).
        event_type: Event name to emit (``eventType`` in JSON).
    """

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=10, ge=0)
    event_type: str = Field(
        default="batch_event", alias="eventType", min_length=1, max_length=200
    )


class BatchEventsData(BaseModel):
    requested: int
    eventsSent: int
    eventType: str
