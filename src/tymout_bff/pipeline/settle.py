"""Join-all combinator that keeps partial failures."""

import asyncio
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Call(Generic[T]):
    """One fallible operation to run alongside others.

    Args:
        label: Name used in logs and outcomes.
        operation: Zero-argument factory returning the awaitable to run.
        fallback: Factory for the value to use if the operation fails.
    """

    label: str
    operation: Callable[[], Awaitable[T]]
    fallback: Callable[[], T]


@dataclass(frozen=True)
class Success(Generic[T]):
    label: str
    value: T
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[T]):
    """A failed call. ``value`` holds the call's fallback."""

    label: str
    error: Exception
    value: T
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return False


Outcome = Success[T] | Failure[T]


async def settle_all(calls: Sequence[Call[Any]]) -> list[Outcome[Any]]:
    """Run all calls concurrently and wait for every one to finish.

    A failing call never cancels or discards its siblings; it settles to a
    Failure carrying its fallback value.

    Args:
        calls: Operations to run.

    Returns:
        One outcome per call, in the same order as ``calls``.
    """
    return list(await asyncio.gather(*(_settle(call) for call in calls)))


async def _settle(call: Call[T]) -> Outcome[T]:
    t0 = time.monotonic()
    try:
        value = await call.operation()
    except Exception as e:
        return Failure(
            label=call.label,
            error=e,
            value=call.fallback(),
            duration_seconds=time.monotonic() - t0,
        )
    return Success(label=call.label, value=value, duration_seconds=time.monotonic() - t0)
