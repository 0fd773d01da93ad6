"""
Simulated runtime and async faults.

Each fault is an explicit tagged error rather than a provoked
interpreter failure. ``raise_fault`` and ``run_async_fault`` raise
``SimulatedFaultError`` so callers can capture a real traceback.
"""

import asyncio
from enum import Enum

from errorlab.domain.catalog.entities import ErrorCategory

ASYNC_TIMEOUT_SECONDS = 0.01


class SimulatedFault(Enum):
    """Closed set of simulated faults.

    Each value is ``(category, subtype, error_name, message)``.
    """

    REFERENCE = (
        ErrorCategory.RUNTIME, "reference", "ReferenceError",
        "name 'undefined_variable' is not defined",
    )
    TYPE = (
        ErrorCategory.RUNTIME, "type", "TypeError",
        "'NoneType' object has no attribute 'property'",
    )
    SYNTAX = (
        ErrorCategory.RUNTIME, "syntax", "SyntaxError",
        "Unexpected token '}' while parsing payload",
    )
    RANGE = (
        ErrorCategory.RUNTIME, "range", "RangeError",
        "Invalid array length: -1",
    )
    URI = (
        ErrorCategory.RUNTIME, "uri", "URIError",
        "URI malformed: '%E0%A4%A'",
    )
    EVAL = (
        ErrorCategory.RUNTIME, "eval", "EvalError",
        "Dynamic expression could not be evaluated",
    )
    RUNTIME_UNKNOWN = (
        ErrorCategory.RUNTIME, "unknown", "RuntimeError",
        "An unexpected runtime error occurred",
    )
    REJECTED = (
        ErrorCategory.ASYNC, "rejected", "AsyncRejectedError",
        "Async operation rejected",
    )
    TIMEOUT = (
        ErrorCategory.ASYNC, "timeout", "AsyncTimeoutError",
        "Async operation timed out",
    )
    CHAIN = (
        ErrorCategory.ASYNC, "chain", "AsyncChainError",
        "Step 2 of async chain failed",
    )
    ALL = (
        ErrorCategory.ASYNC, "all", "AsyncAllError",
        "One of the concurrent operations failed",
    )
    RACE = (
        ErrorCategory.ASYNC, "race", "AsyncRaceError",
        "The fastest operation in the race failed",
    )
    ASYNC_UNKNOWN = (
        ErrorCategory.ASYNC, "unknown", "AsyncError",
        "An asynchronous operation failed",
    )

    def __init__(
        self, category: ErrorCategory, subtype: str, error_name: str, message: str
    ) -> None:
        self.category = category
        self.subtype = subtype
        self.error_name = error_name
        self.message = message

    @classmethod
    def for_subtype(cls, category: ErrorCategory, subtype: str) -> "SimulatedFault":
        """Return the fault for a subtype, or the category's unknown fault."""
        for fault in cls:
            if fault.category is category and fault.subtype == subtype:
                return fault
        if category is ErrorCategory.ASYNC:
            return cls.ASYNC_UNKNOWN
        return cls.RUNTIME_UNKNOWN


class SimulatedFaultError(Exception):
    """Raised to carry a simulated fault through a real call stack."""

    def __init__(self, fault: SimulatedFault, message: str | None = None) -> None:
        self.fault = fault
        self.message = message or fault.message
        super().__init__(self.message)

    @property
    def error_name(self) -> str:
        return self.fault.error_name


def raise_fault(fault: SimulatedFault) -> None:
    """Raise a runtime fault from a nested call."""

    def _evaluate() -> None:
        raise SimulatedFaultError(fault)

    _evaluate()


async def _fail_after(fault: SimulatedFault, delay: float = 0.0) -> None:
    await asyncio.sleep(delay)
    raise SimulatedFaultError(fault)


async def _succeed_after(delay: float) -> str:
    await asyncio.sleep(delay)
    return "ok"


async def run_async_fault(fault: SimulatedFault) -> None:
    """Run a real asyncio scenario that ends in ``SimulatedFaultError``."""
    if fault is SimulatedFault.TIMEOUT:
        try:
            await asyncio.wait_for(
                _succeed_after(1.0), timeout=ASYNC_TIMEOUT_SECONDS
            )
        except asyncio.TimeoutError as exc:
            raise SimulatedFaultError(
                fault,
                f"{fault.message} after {int(ASYNC_TIMEOUT_SECONDS * 1000)}ms",
            ) from exc

    elif fault is SimulatedFault.CHAIN:
        try:
            await _succeed_after(0)
            await _fail_after(SimulatedFault.REJECTED)
        except SimulatedFaultError as exc:
            raise SimulatedFaultError(fault) from exc

    elif fault is SimulatedFault.ALL:
        await asyncio.gather(
            _succeed_after(0),
            _fail_after(fault),
            _succeed_after(0),
        )

    elif fault is SimulatedFault.RACE:
        tasks = [
            asyncio.ensure_future(_fail_after(fault, 0)),
            asyncio.ensure_future(_succeed_after(0.05)),
        ]
        done, pending = await asyncio.wait(
            tasks, return_when=asyncio.FIRST_COMPLETED
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        for task in done:
            task.result()

    else:
        await _fail_after(fault)
