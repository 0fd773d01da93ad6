"""
Dependency injection for the HTTP interface.

Provides FastAPI dependency functions that wire the telemetry
adapter held on ``app.state`` into use cases via constructor injection.
These are the composition root for both bounded contexts.
"""

from fastapi import Depends, Request

from errorlab.application.catalog.emit_error_batch import EmitErrorBatchUseCase
from errorlab.application.catalog.pick_random_error import PickRandomErrorUseCase
from errorlab.application.catalog.resolve_error import ResolveErrorUseCase
from errorlab.application.catalog.trigger_fault import TriggerFaultUseCase
from errorlab.application.catalog.validate_record import ValidateRecordUseCase
from errorlab.application.commerce.emit_event_batch import EmitEventBatchUseCase
from errorlab.application.commerce.list_orders import ListOrdersUseCase
from errorlab.application.commerce.list_products import ListProductsUseCase
from errorlab.application.commerce.list_users import ListUsersUseCase
from errorlab.application.commerce.record_purchase import RecordPurchaseUseCase
from errorlab.application.commerce.register_user import RegisterUserUseCase
from errorlab.application.commerce.simulate_delay import SimulateDelayUseCase
from errorlab.core.config import Settings
from errorlab.domain.catalog.entities import RequestContext
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.shared.middleware.request_context import get_request_context

USER_ID_HEADER = "X-User-Id"
SYSTEM_DISTINCT_ID = "system"


def get_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def get_telemetry(request: Request) -> TelemetryPort:
    """Return the telemetry adapter owned by the application."""
    return request.app.state.telemetry


def get_context(request: Request) -> RequestContext:
    """Return the RequestContext attached by the middleware."""
    return get_request_context(request)


def get_distinct_id(request: Request) -> str:
    """Resolve the analytics identity from the ``X-User-Id`` header."""
    return request.headers.get(USER_ID_HEADER) or SYSTEM_DISTINCT_ID


def get_resolve_error_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> ResolveErrorUseCase:
    """Build ResolveErrorUseCase with its telemetry dependency."""
    return ResolveErrorUseCase(telemetry=telemetry)


def get_validate_record_use_case(
    resolve_error: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> ValidateRecordUseCase:
    """Build ValidateRecordUseCase on top of ResolveErrorUseCase."""
    return ValidateRecordUseCase(resolve_error=resolve_error)


def get_trigger_fault_use_case(
    resolve_error: ResolveErrorUseCase = Depends(get_resolve_error_use_case),
) -> TriggerFaultUseCase:
    """Build TriggerFaultUseCase on top of ResolveErrorUseCase."""
    return TriggerFaultUseCase(resolve_error=resolve_error)


def get_pick_random_error_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> PickRandomErrorUseCase:
    """Build PickRandomErrorUseCase with its telemetry dependency."""
    return PickRandomErrorUseCase(telemetry=telemetry)


def get_emit_error_batch_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
    settings: Settings = Depends(get_settings),
) -> EmitErrorBatchUseCase:
    """Build EmitErrorBatchUseCase with the configured cap."""
    return EmitErrorBatchUseCase(
        telemetry=telemetry, max_errors=settings.max_batch_errors
    )


def get_list_orders_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> ListOrdersUseCase:
    return ListOrdersUseCase(telemetry=telemetry)


def get_list_users_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> ListUsersUseCase:
    return ListUsersUseCase(telemetry=telemetry)


def get_list_products_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> ListProductsUseCase:
    return ListProductsUseCase(telemetry=telemetry)


def get_register_user_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(telemetry=telemetry)


def get_record_purchase_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
) -> RecordPurchaseUseCase:
    return RecordPurchaseUseCase(telemetry=telemetry)


def get_emit_event_batch_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
    settings: Settings = Depends(get_settings),
) -> EmitEventBatchUseCase:
    """Build EmitEventBatchUseCase with the configured cap."""
    return EmitEventBatchUseCase(
        telemetry=telemetry, max_events=settings.max_batch_events
    )


def get_simulate_delay_use_case(
    telemetry: TelemetryPort = Depends(get_telemetry),
    settings: Settings = Depends(get_settings),
) -> SimulateDelayUseCase:
    """Build SimulateDelayUseCase with the configured maximum delay."""
    return SimulateDelayUseCase(
        telemetry=telemetry, max_delay_ms=settings.max_slow_delay_ms
    )
