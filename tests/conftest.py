"""
Shared test fixtures.

Provides an in-memory telemetry adapter and a TestClient bound to an
application that uses it, so no test ever talks to PostHog.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from errorlab.core.config import Settings
from errorlab.domain.catalog.entities import RequestContext, TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort
from errorlab.main import create_app
from errorlab.shared.security.rate_limiting import limiter


class RecordingTelemetry(TelemetryPort):
    """TelemetryPort that keeps every captured event in memory."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []
        self.pending: list[TelemetryEvent] = []
        self.opened = False
        self.flushed = False
        self.closed = False

    @property
    def enabled(self) -> bool:
        return True

    @property
    def stats(self) -> dict[str, Any]:
        return {"captured": len(self.events), "pending": len(self.pending)}

    def open(self) -> None:
        self.opened = True

    def capture(self, event: TelemetryEvent) -> None:
        self.pending.append(event)
        self.events.append(event)

    def flush(self) -> None:
        self.pending.clear()
        self.flushed = True

    def close(self) -> None:
        self.closed = True

    def named(self, event_name: str) -> list[TelemetryEvent]:
        return [e for e in self.events if e.event_name == event_name]


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture
def context() -> RequestContext:
    return RequestContext()


@pytest.fixture
def settings() -> Settings:
    return Settings(posthog_project_key="", log_level="WARNING")


@pytest.fixture
def app(settings, telemetry):
    return create_app(settings=settings, telemetry=telemetry)


@pytest.fixture
def client(app) -> TestClient:
    limiter.reset()
    return TestClient(app, raise_server_exceptions=False)
