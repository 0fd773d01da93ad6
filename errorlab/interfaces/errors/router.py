"""
FastAPI router for the simulated error endpoints.

All routes delegate to use cases. No business logic here.
Every simulated error is answered with the standard error envelope
and the descriptor's status code.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from errorlab.application.catalog.dtos import (
    EmitErrorBatchCommand,
    PickRandomErrorCommand,
    ResolveErrorCommand,
    ResolvedError,
    TriggerFaultCommand,
    ValidateRecordCommand,
)
from errorlab.application.catalog.emit_error_batch import EmitErrorBatchUseCase
from errorlab.application.catalog.pick_random_error import PickRandomErrorUseCase
from errorlab.application.catalog.resolve_error import ResolveErrorUseCase
from errorlab.application.catalog.trigger_fault import TriggerFaultUseCase
from errorlab.application.catalog.validate_record import ValidateRecordUseCase
from errorlab.domain.catalog.entities import ErrorCategory, RequestContext
from errorlab.interfaces.dependencies import (
    get_context,
    get_distinct_id,
    get_emit_error_batch_use_case,
    get_pick_random_error_use_case,
    get_resolve_error_use_case,
    get_trigger_fault_use_case,
    get_validate_record_use_case,
)
from errorlab.interfaces.errors.schemas import (
    BatchErrorsData,
    BatchErrorsRequest,
    EmittedErrorItem,
    ValidationRecordRequest,
)
from errorlab.interfaces.schemas import ErrorResponse, SuccessEnvelope
from errorlab.shared.errors.envelope import error_response
from errorlab.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

router = APIRouter(prefix="/api", tags=["errors"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _render(resolved: ResolvedError) -> JSONResponse:
    """Render a resolved error as the standard error envelope."""
    return error_response(
        resolved.http_status,
        code=resolved.descriptor.code,
        error_type=resolved.category.value,
        message=resolved.descriptor.message,
        request_id=resolved.request_id,
        timestamp=resolved.timestamp,
        subtype=resolved.subtype,
        details=resolved.details,
    )


def _lookup(
    category: ErrorCategory,
    subtype: str,
    context: RequestContext,
    distinct_id: str,
    use_case: ResolveErrorUseCase,
) -> JSONResponse:
    command = ResolveErrorCommand(
        category=category,
        subtype=subtype,
        context=context,
        distinct_id=distinct_id,
    )
    return _render(use_case.execute(command))


@router.get(
    "/error/http/{code}",
    responses=ERROR_RESPONSES,
    summary="Simulate an HTTP status error",
    description="Unknown codes fall back to 500 Internal Server Error.",
)
def http_error(
    code: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Answer with the canned descriptor for an HTTP status code."""
    return _lookup(ErrorCategory.HTTP, code, context, distinct_id, use_case)


@router.get(
    "/error/runtime/{error_type}",
    responses=ERROR_RESPONSES,
    summary="Simulate a runtime error",
    description="Raises and catches a tagged runtime fault; returns its stack.",
)
async def runtime_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: TriggerFaultUseCase = Depends(get_trigger_fault_use_case),
) -> JSONResponse:
    """Trigger a runtime fault (reference, type, syntax, range, uri, eval)."""
    command = TriggerFaultCommand(
        category=ErrorCategory.RUNTIME,
        subtype=error_type,
        context=context,
        distinct_id=distinct_id,
    )
    return _render(await use_case.execute(command))


@router.get(
    "/error/async/{error_type}",
    responses=ERROR_RESPONSES,
    summary="Simulate an async error",
    description="Runs an asyncio scenario that fails (rejected, timeout, chain, all, race).",
)
async def async_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: TriggerFaultUseCase = Depends(get_trigger_fault_use_case),
) -> JSONResponse:
    """Trigger a failing asynchronous operation."""
    command = TriggerFaultCommand(
        category=ErrorCategory.ASYNC,
        subtype=error_type,
        context=context,
        distinct_id=distinct_id,
    )
    return _render(await use_case.execute(command))


@router.get("/error/database/{error_type}", responses=ERROR_RESPONSES)
def database_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Simulate a database failure."""
    return _lookup(ErrorCategory.DATABASE, error_type, context, distinct_id, use_case)


@router.get("/error/network/{error_type}", responses=ERROR_RESPONSES)
def network_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Simulate a network failure."""
    return _lookup(ErrorCategory.NETWORK, error_type, context, distinct_id, use_case)


@router.get("/error/auth/{error_type}", responses=ERROR_RESPONSES)
def auth_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Simulate an authentication or authorization failure."""
    return _lookup(ErrorCategory.AUTH, error_type, context, distinct_id, use_case)


@router.get("/error/business/{error_type}", responses=ERROR_RESPONSES)
def business_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Simulate a business rule violation."""
    return _lookup(ErrorCategory.BUSINESS, error_type, context, distinct_id, use_case)


@router.get("/error/resource/{error_type}", responses=ERROR_RESPONSES)
def resource_error(
    error_type: str,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> JSONResponse:
    """Simulate resource exhaustion."""
    return _lookup(ErrorCategory.RESOURCE, error_type, context, distinct_id, use_case)


@router.post(
    "/error/validation",
    responses={422: {"model": ErrorResponse}},
    summary="Simulate a validation error",
    description="Runs every field rule and reports all violations together.",
)
def validation_error(
    request_body: ValidationRecordRequest | None = None,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: ValidateRecordUseCase = Depends(get_validate_record_use_case),
) -> JSONResponse:
    """Validate the submitted record and answer 422 with its violations."""
    record = (request_body or ValidationRecordRequest()).model_dump()
    command = ValidateRecordCommand(
        record=record, context=context, distinct_id=distinct_id
    )
    return _render(use_case.execute(command))


@router.get(
    "/error/random",
    status_code=307,
    summary="Redirect to a random error",
    description="Picks one of ten error paths by weight and redirects to it.",
)
def random_error(
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: PickRandomErrorUseCase = Depends(get_pick_random_error_use_case),
) -> RedirectResponse:
    """Redirect to a weighted-random error path."""
    result = use_case.execute(
        PickRandomErrorCommand(context=context, distinct_id=distinct_id)
    )
    return RedirectResponse(url=result.path, status_code=307)


@router.get(
    "/error/unhandled",
    responses={500: {"model": ErrorResponse}},
    summary="Raise an unhandled error",
    description="Raises a genuine exception that only the top-level handler catches.",
)
def unhandled_error() -> None:
    """Raise an exception that no route-level code handles."""
    raise RuntimeError("Intentional API error")


@router.post(
    "/batch-errors",
    response_model=SuccessEnvelope[BatchErrorsData],
    summary="Emit a batch of error events",
    description="Emits up to 20 error events cycling through error categories.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
def batch_errors(
    request: Request,
    request_body: BatchErrorsRequest | None = None,
    context: RequestContext = Depends(get_context),
    distinct_id: str = Depends(get_distinct_id),
    use_case: EmitErrorBatchUseCase = Depends(get_emit_error_batch_use_case),
) -> SuccessEnvelope[BatchErrorsData]:
    """Emit simulated error events without failing the request."""
    body = request_body or BatchErrorsRequest()
    result = use_case.execute(
        EmitErrorBatchCommand(
            count=body.count, context=context, distinct_id=distinct_id
        )
    )
    return SuccessEnvelope[BatchErrorsData](
        data=BatchErrorsData(
            requested=result.requested,
            errorsSent=len(result.emitted),
            errors=[
                EmittedErrorItem(type=e.category, code=e.code, status=e.http_status)
                for e in result.emitted
            ],
        ),
        requestId=context.request_id,
    )
