"""
Port interfaces (ABCs) for the error catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any

from errorlab.domain.catalog.entities import TelemetryEvent


class TelemetryPort(ABC):
    """Port for submitting telemetry events to an analytics sink.

    Submission is fire-and-forget: ``capture`` must return quickly and
    must never raise because the sink is unreachable.
    """

    @abstractmethod
    def open(self) -> None:
        """Prepare the sink for submissions."""
        raise NotImplementedError

    @abstractmethod
    def capture(self, event: TelemetryEvent) -> None:
        """Queue one event for delivery."""
        raise NotImplementedError

    @abstractmethod
    def flush(self) -> None:
        """Block until every queued event has been handed to the transport."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Flush and release the sink. Further captures are dropped."""
        raise NotImplementedError

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether events are actually delivered anywhere."""
        raise NotImplementedError

    @property
    def stats(self) -> dict[str, Any]:
        return {}
