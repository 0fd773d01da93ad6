"""
Tests for the error catalog application layer.

Use cases run against the in-memory telemetry fake.
"""

import random

import pytest

from errorlab.application.catalog.dtos import (
    EmitErrorBatchCommand,
    PickRandomErrorCommand,
    ResolveErrorCommand,
    TriggerFaultCommand,
    ValidateRecordCommand,
)
from errorlab.application.catalog.emit_error_batch import (
    BATCH_CATEGORIES,
    EmitErrorBatchUseCase,
)
from errorlab.application.catalog.events import EXCEPTION_EVENT
from errorlab.application.catalog.pick_random_error import (
    RANDOM_SELECTED_EVENT,
    PickRandomErrorUseCase,
)
from errorlab.application.catalog.resolve_error import ResolveErrorUseCase
from errorlab.application.catalog.trigger_fault import TriggerFaultUseCase
from errorlab.application.catalog.validate_record import ValidateRecordUseCase
from errorlab.domain.catalog.entities import ErrorCategory
from errorlab.domain.catalog.random_routes import RANDOM_ROUTES


class TestResolveErrorUseCase:
    """Tests for ResolveErrorUseCase."""

    def test_returns_status_descriptor_and_event(self, telemetry, context) -> None:
        use_case = ResolveErrorUseCase(telemetry)
        resolved = use_case.execute(
            ResolveErrorCommand(ErrorCategory.DATABASE, "deadlock", context)
        )

        assert resolved.http_status == 409
        assert resolved.descriptor.code == "DB_DEADLOCK"
        assert resolved.request_id == context.request_id
        assert telemetry.events == [resolved.event]

    def test_event_carries_error_metadata(self, telemetry, context) -> None:
        use_case = ResolveErrorUseCase(telemetry)
        resolved = use_case.execute(
            ResolveErrorCommand(
                ErrorCategory.AUTH, "expired_token", context, distinct_id="user_42"
            )
        )

        event = resolved.event
        assert event.event_name == EXCEPTION_EVENT
        assert event.distinct_id == "user_42"
        assert event.properties["error_type"] == "auth"
        assert event.properties["error_subtype"] == "expired_token"
        assert event.properties["error_code"] == "TOKEN_EXPIRED"
        assert event.properties["request_id"] == context.request_id
        assert (
            event.properties["$exception_fingerprint"]
            == "TOKEN_EXPIRED:auth:expired_token"
        )

    def test_unknown_subtype_uses_default(self, telemetry, context) -> None:
        resolved = ResolveErrorUseCase(telemetry).execute(
            ResolveErrorCommand(ErrorCategory.BUSINESS, "<script>", context)
        )
        assert resolved.descriptor.code == "BUSINESS_RULE_VIOLATION"
        assert resolved.http_status == 422
        assert resolved.subtype == "<script>"
        assert len(telemetry.events) == 1


class TestValidateRecordUseCase:
    """Tests for ValidateRecordUseCase."""

    def test_violations_in_details(self, telemetry, context) -> None:
        use_case = ValidateRecordUseCase(ResolveErrorUseCase(telemetry))
        resolved = use_case.execute(
            ValidateRecordCommand(record={"email": "no-at-sign"}, context=context)
        )

        assert resolved.http_status == 422
        assert resolved.descriptor.code == "VALIDATION_FAILED"
        fields = [v["field"] for v in resolved.details["violations"]]
        assert "email" in fields
        assert telemetry.events[0].properties["error_details"] == dict(
            resolved.details
        )


class TestTriggerFaultUseCase:
    """Tests for TriggerFaultUseCase."""

    @pytest.mark.asyncio
    async def test_runtime_fault_returns_stack(self, telemetry, context) -> None:
        use_case = TriggerFaultUseCase(ResolveErrorUseCase(telemetry))
        resolved = await use_case.execute(
            TriggerFaultCommand(ErrorCategory.RUNTIME, "reference", context)
        )

        assert resolved.http_status == 500
        assert resolved.descriptor.code == "REFERENCE_ERROR"
        assert resolved.details["errorName"] == "ReferenceError"
        assert "SimulatedFaultError" in resolved.details["stack"]
        assert telemetry.events[0].properties["$exception_type"] == "ReferenceError"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("subtype", "status", "code"),
        [
            ("rejected", 500, "ASYNC_REJECTED"),
            ("timeout", 504, "ASYNC_TIMEOUT"),
            ("chain", 500, "ASYNC_CHAIN_FAILED"),
            ("all", 500, "ASYNC_ALL_FAILED"),
            ("race", 500, "ASYNC_RACE_FAILED"),
        ],
    )
    async def test_async_faults(self, telemetry, context, subtype, status, code) -> None:
        use_case = TriggerFaultUseCase(ResolveErrorUseCase(telemetry))
        resolved = await use_case.execute(
            TriggerFaultCommand(ErrorCategory.ASYNC, subtype, context)
        )
        assert resolved.http_status == status
        assert resolved.descriptor.code == code
        assert len(telemetry.events) == 1

    @pytest.mark.asyncio
    async def test_chain_reports_cause(self, telemetry, context) -> None:
        use_case = TriggerFaultUseCase(ResolveErrorUseCase(telemetry))
        resolved = await use_case.execute(
            TriggerFaultCommand(ErrorCategory.ASYNC, "chain", context)
        )
        assert resolved.details["cause"].startswith("SimulatedFaultError")

    @pytest.mark.asyncio
    async def test_unknown_runtime_subtype(self, telemetry, context) -> None:
        use_case = TriggerFaultUseCase(ResolveErrorUseCase(telemetry))
        resolved = await use_case.execute(
            TriggerFaultCommand(ErrorCategory.RUNTIME, "segfault", context)
        )
        assert resolved.descriptor.code == "RUNTIME_ERROR"
        assert resolved.details["errorName"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_rejects_lookup_category(self, telemetry, context) -> None:
        use_case = TriggerFaultUseCase(ResolveErrorUseCase(telemetry))
        with pytest.raises(ValueError):
            await use_case.execute(
                TriggerFaultCommand(ErrorCategory.DATABASE, "deadlock", context)
            )


class TestPickRandomErrorUseCase:
    """Tests for PickRandomErrorUseCase."""

    def test_picks_configured_path(self, telemetry, context) -> None:
        use_case = PickRandomErrorUseCase(telemetry, rng=random.Random(5))
        result = use_case.execute(PickRandomErrorCommand(context=context))

        assert result.path in {r.path for r in RANDOM_ROUTES}
        event = telemetry.named(RANDOM_SELECTED_EVENT)[0]
        assert event.properties["path"] == result.path


class TestEmitErrorBatchUseCase:
    """Tests for EmitErrorBatchUseCase."""

    def test_caps_at_twenty(self, telemetry, context) -> None:
        result = EmitErrorBatchUseCase(telemetry).execute(
            EmitErrorBatchCommand(count=50, context=context)
        )
        assert result.requested == 50
        assert len(result.emitted) == 20
        assert len(telemetry.named(EXCEPTION_EVENT)) == 20

    def test_cycles_through_categories(self, telemetry, context) -> None:
        result = EmitErrorBatchUseCase(telemetry).execute(
            EmitErrorBatchCommand(count=10, context=context)
        )
        categories = [e.category for e in result.emitted]
        assert categories[:8] == [c.value for c in BATCH_CATEGORIES]
        assert categories[8:] == ["database", "network"]

    def test_negative_count_emits_nothing(self, telemetry, context) -> None:
        result = EmitErrorBatchUseCase(telemetry).execute(
            EmitErrorBatchCommand(count=-3, context=context)
        )
        assert result.emitted == []
        assert telemetry.events == []
