"""
FastAPI router for the synthetic commerce endpoints.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Successful responses use the standard success envelope.
"""

from fastapi import APIRouter, Depends, Request

from errorlab.application.commerce.dtos import (
    EmitEventBatchCommand,
    ListOrdersQuery,
    ListProductsQuery,
    ListUsersQuery,
    RecordPurchaseCommand,
    RegisterUserCommand,
    SimulateDelayCommand,
)
from errorlab.application.commerce.emit_event_batch import EmitEventBatchUseCase
from errorlab.application.commerce.list_orders import ListOrdersUseCase
from errorlab.application.commerce.list_products import ListProductsUseCase
from errorlab.application.commerce.list_users import ListUsersUseCase
from errorlab.application.commerce.record_purchase import RecordPurchaseUseCase
from errorlab.application.commerce.register_user import RegisterUserUseCase
from errorlab.application.commerce.simulate_delay import SimulateDelayUseCase
from errorlab.domain.catalog.entities import RequestContext
from errorlab.interfaces.commerce.schemas import (
    BatchEventsData,
    BatchEventsRequest,
    OrderItem,
    OrdersData,
    ProductItem,
    ProductsData,
    PurchaseData,
    PurchaseRequest,
    RegisterData,
    RegisterRequest,
    SlowData,
    UserItem,
    UsersData,
)
from errorlab.interfaces.dependencies import (
    USER_ID_HEADER,
    get_context,
    get_distinct_id,
    get_emit_event_batch_use_case,
    get_list_orders_use_case,
    get_list_products_use_case,
    get_list_users_use_case,
    get_record_purchase_use_case,
    get_register_user_use_case,
    get_simulate_delay_use_case,
)
from errorlab.interfaces.schemas import ErrorResponse, SuccessEnvelope
from errorlab.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(prefix="/api", tags=["commerce"])

DEFAULT_DELAY_MS = 1000
ANONYMOUS_USER = "anonymous"


@router.get(
    "/orders",
    response_model=SuccessEnvelope[OrdersData],
    summary="List orders",
    description="Returns generated orders for the given user.",
)
def list_orders(
    request: Request,
    user: str | None = None,
    count: int | None = None,
    context: RequestContext = Depends(get_context),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
) -> SuccessEnvelope[OrdersData]:
    """List generated orders, attributed to ``user`` or ``X-User-Id``."""
    user_id = user or request.headers.get(USER_ID_HEADER) or ANONYMOUS_USER
    result = use_case.execute(
        ListOrdersQuery(user_id=user_id, count=count, context=context)
    )
    return SuccessEnvelope[OrdersData](
        data=OrdersData(
            userId=result.user_id,
            count=len(result.orders),
            orders=[
                OrderItem(
                    id=o.id,
                    userId=o.user_id,
                    productId=o.product_id,
                    quantity=o.quantity,
                    total=o.total,
                    status=o.status,
                    createdAt=o.created_at,
                )
                for o in result.orders
            ],
        ),
        requestId=context.request_id,
    )


@router.get(
    "/users",
    response_model=SuccessEnvelope[UsersData],
    summary="List users",
)
def list_users(
    limit: int | None = None,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> SuccessEnvelope[UsersData]:
    """List generated user profiles."""
    result = use_case.execute(
        ListUsersQuery(distinct_id=distinct_id, limit=limit, context=context)
    )
    return SuccessEnvelope[UsersData](
        data=UsersData(
            count=len(result.users),
            users=[
                UserItem(
                    id=u.id,
                    name=u.name,
                    email=u.email,
                    plan=u.plan,
                    createdAt=u.created_at,
                )
                for u in result.users
            ],
        ),
        requestId=context.request_id,
    )


@router.get(
    "/products",
    response_model=SuccessEnvelope[ProductsData],
    summary="List products",
)
def list_products(
    category: str | None = None,
    limit: int | None = None,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> SuccessEnvelope[ProductsData]:
    """List generated products, optionally filtered by category."""
    result = use_case.execute(
        ListProductsQuery(
            distinct_id=distinct_id, category=category, limit=limit, context=context
        )
    )
    return SuccessEnvelope[ProductsData](
        data=ProductsData(
            category=result.category,
            count=len(result.products),
            products=[
                ProductItem(
                    id=p.id,
                    name=p.name,
                    category=p.category,
                    price=p.price,
                    inStock=p.in_stock,
                )
                for p in result.products
            ],
        ),
        requestId=context.request_id,
    )


@router.get(
    "/slow",
    response_model=SuccessEnvelope[SlowData],
    summary="Simulate a slow response",
    description="Sleeps for min(ms, 10000) milliseconds without blocking other requests.",
)
async def slow(
    ms: int = DEFAULT_DELAY_MS,
    context: RequestContext = Depends(get_context),
    use_case: SimulateDelayUseCase = Depends(get_simulate_delay_use_case),
) -> SuccessEnvelope[SlowData]:
    """Delay the response and report the delay actually applied."""
    result = await use_case.execute(
        SimulateDelayCommand(requested_ms=ms, context=context)
    )
    return SuccessEnvelope[SlowData](
        data=SlowData(requested=result.requested_ms, delay=result.delay_ms),
        requestId=context.request_id,
    )


@router.post(
    "/register",
    response_model=SuccessEnvelope[RegisterData],
    status_code=201,
    responses={422: {"model": ErrorResponse}},
    summary="Register a user",
)
def register(
    request_body: RegisterRequest,
    context: RequestContext = Depends(get_context),
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> SuccessEnvelope[RegisterData]:
    """Register a user and return the generated user id."""
    result = use_case.execute(
        RegisterUserCommand(
            name=request_body.name, email=request_body.email, context=context
        )
    )
    return SuccessEnvelope[RegisterData](
        data=RegisterData(userId=result.user_id, name=result.name, email=result.email),
        requestId=context.request_id,
    )


@router.post(
    "/purchase",
    response_model=SuccessEnvelope[PurchaseData],
    status_code=201,
    responses={422: {"model": ErrorResponse}},
    summary="Record a purchase",
)
def purchase(
    request_body: PurchaseRequest,
    context: RequestContext = Depends(get_context),
    use_case: RecordPurchaseUseCase = Depends(get_record_purchase_use_case),
) -> SuccessEnvelope[PurchaseData]:
    """Record a purchase and return the generated purchase id."""
    result = use_case.execute(
        RecordPurchaseCommand(
            user_id=request_body.user_id,
            product_id=request_body.product_id,
            amount=request_body.amount,
            context=context,
        )
    )
    return SuccessEnvelope[PurchaseData](
        data=PurchaseData(
            purchaseId=result.purchase_id,
            userId=result.user_id,
            productId=result.product_id,
            amount=result.amount,
        ),
        requestId=context.request_id,
    )


@router.post(
    "/batch-events",
    response_model=SuccessEnvelope[BatchEventsData],
    summary="Emit a batch of events",
    description="Emits up to 100 analytics events of the given type.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def batch_events(
    request: Request,
    request_body: BatchEventsRequest | None = None,
    context: RequestContext = Depends(get_context),
    use_case: EmitEventBatchUseCase = Depends(get_emit_event_batch_use_case),
) -> SuccessEnvelope[BatchEventsData]:
    """Emit a batch of analytics events."""
    body = request_body or BatchEventsRequest()
    result = use_case.execute(
        EmitEventBatchCommand(
            count=body.count, event_type=body.event_type, context=context
        )
    )
    return SuccessEnvelope[BatchEventsData](
        data=BatchEventsData(
            requested=result.requested,
            eventsSent=result.events_sent,
            eventType=result.event_type,
        ),
        requestId=context.request_id,
    )
