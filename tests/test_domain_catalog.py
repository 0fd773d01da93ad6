"""
Tests for the error catalog domain layer.

Tests descriptor tables, the collect-all validator, weighted random
selection and simulated faults in isolation.
No external dependencies or IO required.
"""

import random
from collections import Counter
from types import MappingProxyType

import pytest

from errorlab.domain.catalog.descriptors import (
    CATALOG,
    KNOWN_SUBTYPES,
    get_table,
    lookup,
    validate_catalog,
)
from errorlab.domain.catalog.entities import (
    CategoryTable,
    ErrorCategory,
    ErrorDescriptor,
    RandomRoute,
    TelemetryEvent,
)
from errorlab.domain.catalog.errors import (
    CatalogConfigurationError,
    UnknownCategoryError,
)
from errorlab.domain.catalog.faults import (
    SimulatedFault,
    SimulatedFaultError,
    raise_fault,
    run_async_fault,
)
from errorlab.domain.catalog.random_routes import RANDOM_ROUTES, pick_route
from errorlab.domain.catalog.validation import (
    PLACEHOLDER_VIOLATION,
    collect_violations,
)

VALID_RECORD = {
    "email": "jane@example.com",
    "password": "correct-horse",
    "age": 34,
    "phone": "+1 (555) 010-2030",
    "username": "jane_doe",
}


class TestDescriptorLookup:
    """Tests for static descriptor lookups."""

    @pytest.mark.parametrize(
        ("category", "subtype", "status", "code"),
        [
            (ErrorCategory.HTTP, "404", 404, "NOT_FOUND"),
            (ErrorCategory.HTTP, "429", 429, "TOO_MANY_REQUESTS"),
            (ErrorCategory.HTTP, "503", 503, "SERVICE_UNAVAILABLE"),
            (ErrorCategory.DATABASE, "deadlock", 409, "DB_DEADLOCK"),
            (ErrorCategory.DATABASE, "connection", 503, "DB_CONNECTION_FAILED"),
            (ErrorCategory.NETWORK, "dns", 502, "DNS_RESOLUTION_FAILED"),
            (ErrorCategory.AUTH, "account_locked", 423, "ACCOUNT_LOCKED"),
            (ErrorCategory.BUSINESS, "insufficient_funds", 402, "INSUFFICIENT_FUNDS"),
            (ErrorCategory.RESOURCE, "disk", 507, "DISK_FULL"),
            (ErrorCategory.RUNTIME, "reference", 500, "REFERENCE_ERROR"),
            (ErrorCategory.ASYNC, "timeout", 504, "ASYNC_TIMEOUT"),
        ],
    )
    def test_known_subtype(self, category, subtype, status, code) -> None:
        descriptor = lookup(category, subtype)
        assert descriptor.http_status == status
        assert descriptor.code == code

    def test_unknown_http_code_falls_back_to_500(self) -> None:
        assert lookup(ErrorCategory.HTTP, "999") == lookup(ErrorCategory.HTTP, "500")

    @pytest.mark.parametrize("category", list(CATALOG))
    def test_unknown_subtype_uses_category_default(self, category) -> None:
        """An unknown subtype never crashes and never yields a 2xx."""
        table = get_table(category)
        descriptor = lookup(category, "definitely-not-a-subtype")
        assert descriptor == table.default
        assert 400 <= descriptor.http_status <= 599

    def test_random_has_no_table(self) -> None:
        with pytest.raises(UnknownCategoryError):
            get_table(ErrorCategory.RANDOM)

    def test_tables_are_immutable(self) -> None:
        with pytest.raises(TypeError):
            CATALOG[ErrorCategory.HTTP].entries["418"] = ErrorDescriptor(
                "TEAPOT", 418, "I'm a teapot"
            )


class TestValidateCatalog:
    """Tests for the startup consistency check."""

    def test_shipped_catalog_is_valid(self) -> None:
        validate_catalog()

    def test_every_enumerated_category_has_a_table(self) -> None:
        assert set(KNOWN_SUBTYPES) == set(CATALOG)

    def test_typo_in_table_key_is_rejected(self) -> None:
        table = CATALOG[ErrorCategory.DATABASE]
        entries = dict(table.entries)
        entries["dedlock"] = entries.pop("deadlock")
        broken = dict(CATALOG)
        broken[ErrorCategory.DATABASE] = CategoryTable(
            ErrorCategory.DATABASE, MappingProxyType(entries), table.default
        )

        with pytest.raises(CatalogConfigurationError) as exc_info:
            validate_catalog(catalog=broken)

        assert exc_info.value.category == "database"
        assert any("deadlock" in p for p in exc_info.value.problems)
        assert any("dedlock" in p for p in exc_info.value.problems)

    def test_success_status_is_rejected(self) -> None:
        table = CATALOG[ErrorCategory.AUTH]
        entries = dict(table.entries)
        entries["forbidden"] = ErrorDescriptor("FORBIDDEN", 200, "oops")
        broken = dict(CATALOG)
        broken[ErrorCategory.AUTH] = CategoryTable(
            ErrorCategory.AUTH, MappingProxyType(entries), table.default
        )

        with pytest.raises(CatalogConfigurationError):
            validate_catalog(catalog=broken)

    def test_missing_table_is_rejected(self) -> None:
        broken = dict(CATALOG)
        del broken[ErrorCategory.RESOURCE]
        with pytest.raises(CatalogConfigurationError):
            validate_catalog(catalog=broken)


class TestCollectViolations:
    """Tests for the collect-all validator."""

    def test_valid_record_yields_single_placeholder(self) -> None:
        assert collect_violations(VALID_RECORD) == [PLACEHOLDER_VIOLATION]

    def test_email_without_at_sign_is_rejected(self) -> None:
        violations = collect_violations({**VALID_RECORD, "email": "no-at-sign"})
        assert [v.field for v in violations] == ["email"]

    def test_all_violations_are_reported_together(self) -> None:
        violations = collect_violations(
            {
                "email": "bad",
                "password": "short",
                "age": 7,
                "phone": "call me",
                "username": "x!",
            }
        )
        assert [v.field for v in violations] == [
            "email",
            "password",
            "age",
            "phone",
            "username",
        ]

    def test_empty_record_reports_required_fields(self) -> None:
        fields = {v.field for v in collect_violations({})}
        assert fields == {"email", "password", "username"}

    @pytest.mark.parametrize("age", ["abc", 12, 121, 30.5, True])
    def test_invalid_age(self, age) -> None:
        violations = collect_violations({**VALID_RECORD, "age": age})
        assert [v.field for v in violations] == ["age"]

    @pytest.mark.parametrize("age", [10**400, -(10**400), "1e400", "9" * 400])
    def test_huge_age_is_a_violation(self, age) -> None:
        violations = collect_violations({**VALID_RECORD, "age": age})
        assert [v.field for v in violations] == ["age"]

    def test_huge_age_keeps_other_violations(self) -> None:
        violations = collect_violations({"email": "bad", "age": 10**400})
        assert [v.field for v in violations] == [
            "email",
            "password",
            "age",
            "username",
        ]

    def test_numeric_string_age_is_accepted(self) -> None:
        assert collect_violations({**VALID_RECORD, "age": "42"}) == [
            PLACEHOLDER_VIOLATION
        ]

    def test_username_with_symbols_is_rejected(self) -> None:
        violations = collect_violations({**VALID_RECORD, "username": "jane-doe"})
        assert violations[0].field == "username"
        assert "letters" in violations[0].message


class TestPickRoute:
    """Tests for weighted random error selection."""

    def test_ten_routes_configured(self) -> None:
        assert len(RANDOM_ROUTES) == 10
        assert len({r.path for r in RANDOM_ROUTES}) == 10

    def test_pick_returns_configured_route(self) -> None:
        route = pick_route(rng=random.Random(7))
        assert route in RANDOM_ROUTES

    def test_frequencies_follow_weights(self) -> None:
        rng = random.Random(1234)
        samples = 20_000
        counts = Counter(pick_route(rng=rng).path for _ in range(samples))
        total_weight = sum(r.weight for r in RANDOM_ROUTES)

        for route in RANDOM_ROUTES:
            expected = route.weight / total_weight
            observed = counts[route.path] / samples
            assert abs(observed - expected) < 0.02, route.path

    def test_zero_weight_is_never_picked(self) -> None:
        routes = (RandomRoute("/a", 1), RandomRoute("/b", 0))
        rng = random.Random(3)
        assert {pick_route(routes, rng).path for _ in range(200)} == {"/a"}

    def test_empty_table_raises(self) -> None:
        with pytest.raises(ValueError):
            pick_route(())


class TestSimulatedFaults:
    """Tests for tagged runtime and async faults."""

    def test_for_subtype_known(self) -> None:
        fault = SimulatedFault.for_subtype(ErrorCategory.RUNTIME, "range")
        assert fault is SimulatedFault.RANGE
        assert fault.error_name == "RangeError"

    def test_for_subtype_unknown(self) -> None:
        assert (
            SimulatedFault.for_subtype(ErrorCategory.RUNTIME, "nope")
            is SimulatedFault.RUNTIME_UNKNOWN
        )
        assert (
            SimulatedFault.for_subtype(ErrorCategory.ASYNC, "nope")
            is SimulatedFault.ASYNC_UNKNOWN
        )

    def test_raise_fault_carries_fault(self) -> None:
        with pytest.raises(SimulatedFaultError) as exc_info:
            raise_fault(SimulatedFault.TYPE)
        assert exc_info.value.fault is SimulatedFault.TYPE
        assert exc_info.value.error_name == "TypeError"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fault",
        [
            SimulatedFault.REJECTED,
            SimulatedFault.TIMEOUT,
            SimulatedFault.CHAIN,
            SimulatedFault.ALL,
            SimulatedFault.RACE,
        ],
    )
    async def test_async_faults_raise(self, fault) -> None:
        with pytest.raises(SimulatedFaultError) as exc_info:
            await run_async_fault(fault)
        assert exc_info.value.fault is fault

    @pytest.mark.asyncio
    async def test_chain_keeps_cause(self) -> None:
        with pytest.raises(SimulatedFaultError) as exc_info:
            await run_async_fault(SimulatedFault.CHAIN)
        assert isinstance(exc_info.value.__cause__, SimulatedFaultError)

    @pytest.mark.asyncio
    async def test_timeout_wraps_timeout_error(self) -> None:
        with pytest.raises(SimulatedFaultError) as exc_info:
            await run_async_fault(SimulatedFault.TIMEOUT)
        assert "timed out" in exc_info.value.message


class TestTelemetryEvent:
    """Tests for the TelemetryEvent entity."""

    def test_properties_are_read_only(self) -> None:
        event = TelemetryEvent("system", "test", {"a": 1})
        with pytest.raises(TypeError):
            event.properties["b"] = 2

    def test_properties_are_copied(self) -> None:
        source = {"a": 1}
        event = TelemetryEvent("system", "test", source)
        source["a"] = 2
        assert event.properties["a"] == 1
