"""Test helpers (small, reusable doubles).

Keep this file tiny: pending payload factories and a call spy cover most of
what the Result tests need.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any


async def later[T](value: T, *, delay: float = 0) -> T:
    """Resolve to ``value`` after yielding to the event loop."""
    await asyncio.sleep(delay)
    return value


async def failing(exc: Exception, *, delay: float = 0) -> Any:
    """Raise ``exc`` after yielding to the event loop."""
    await asyncio.sleep(delay)
    raise exc


@dataclass
class CallSpy:
    """Callable that records its arguments and returns a scripted value."""

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class CountingSource:
    """Produces coroutines and counts how many actually ran."""

    value: Any = None
    runs: int = 0

    async def produce(self, *, delay: float = 0.01) -> Any:
        self.runs += 1
        await asyncio.sleep(delay)
        return self.value
