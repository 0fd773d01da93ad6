"""
PostHog telemetry adapter.

Implements TelemetryPort on top of the ``posthog`` SDK. Events are queued
by the SDK and delivered by its consumer thread, so ``capture`` never
waits on the network. Delivery failures are logged through the SDK's
``on_error`` hook and never reach the request path.

Without a project key the adapter is disabled: captures are counted as
dropped and nothing is sent.
"""

import logging
import platform
import threading
from typing import Any

from posthog import Posthog

from errorlab.domain.catalog.entities import TelemetryEvent
from errorlab.domain.catalog.ports import TelemetryPort

logger = logging.getLogger(__name__)

EVENT_SOURCE = "backend-api"


class PostHogTelemetryAdapter(TelemetryPort):
    """TelemetryPort implementation backed by a PostHog client.

    Args:
        project_key: PostHog project API key. Empty disables telemetry.
        host: PostHog ingestion host.
        environment: Deployment environment attached to every event.
        flush_at: Queue size that triggers a background flush.
        flush_interval: Seconds between background flushes.
        client_factory: Builds the SDK client. Overridable for tests.
    """

    def __init__(
        self,
        project_key: str,
        host: str,
        environment: str = "development",
        flush_at: int = 1,
        flush_interval: float = 0.5,
        client_factory: Any = Posthog,
    ) -> None:
        self._project_key = project_key
        self._host = host
        self._environment = environment
        self._flush_at = flush_at
        self._flush_interval = flush_interval
        self._client_factory = client_factory
        self._client: Any | None = None
        self._lock = threading.Lock()
        self._stats = {
            "captured": 0,
            "dropped": 0,
            "capture_errors": 0,
            "delivery_errors": 0,
        }

    @property
    def enabled(self) -> bool:
        return bool(self._project_key)

    @property
    def stats(self) -> dict[str, Any]:
        with self._lock:
            snapshot = dict(self._stats)
        snapshot["enabled"] = self.enabled
        snapshot["open"] = self._client is not None
        return snapshot

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Create the SDK client. Safe to call more than once."""
        if self._client is not None:
            return
        if not self.enabled:
            logger.warning("POSTHOG_PROJECT_KEY not set - events will not be tracked")
            return

        self._client = self._client_factory(
            self._project_key,
            host=self._host,
            flush_at=self._flush_at,
            flush_interval=self._flush_interval,
            on_error=self._on_delivery_error,
        )
        logger.info("PostHog telemetry enabled (host=%s)", self._host)

    def flush(self) -> None:
        if self._client is None:
            return
        try:
            self._client.flush()
        except Exception:
            logger.warning("PostHog flush failed", exc_info=True)

    def close(self) -> None:
        """Flush pending events and stop the SDK consumer."""
        client, self._client = self._client, None
        if client is None:
            return
        try:
            client.flush()
            client.shutdown()
        except Exception:
            logger.warning("PostHog shutdown failed", exc_info=True)
        logger.info("PostHog telemetry closed (%s)", self.stats)

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def capture(self, event: TelemetryEvent) -> None:
        if self._client is None:
            self._count("dropped")
            logger.debug("Dropped event %s (telemetry disabled)", event.event_name)
            return

        try:
            self._client.capture(
                distinct_id=event.distinct_id,
                event=event.event_name,
                properties=self._enrich(event),
                timestamp=event.timestamp,
            )
        except Exception:
            self._count("capture_errors")
            logger.warning(
                "Failed to queue event %s", event.event_name, exc_info=True
            )
            return

        self._count("captured")
        logger.debug("Event: %s | User: %s", event.event_name, event.distinct_id)

    def _enrich(self, event: TelemetryEvent) -> dict[str, Any]:
        properties = dict(event.properties)
        properties.setdefault("$source", EVENT_SOURCE)
        properties.setdefault("environment", self._environment)
        properties.setdefault("python_version", platform.python_version())
        return properties

    def _on_delivery_error(self, error: Exception, batch: Any) -> None:
        self._count("delivery_errors")
        size = len(batch) if hasattr(batch, "__len__") else "?"
        logger.warning("PostHog delivery failed for %s event(s): %s", size, error)

    def _count(self, key: str) -> None:
        with self._lock:
            self._stats[key] += 1
