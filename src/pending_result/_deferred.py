"""Write-once cell around a possibly pending payload.

The first resolver wraps the awaitable in a single shared Future; concurrent
resolvers await that same Future, so the underlying computation runs once even
though a coroutine can only be awaited a single time.
"""

from __future__ import annotations

import asyncio
import dataclasses
import inspect
import logging
from typing import TYPE_CHECKING, Any, cast

from pending_result._dev_flags import dev_trace_enabled

if TYPE_CHECKING:
    from collections.abc import Awaitable
    from types import TracebackType

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Settled[T]:
    """The payload resolved to ``value`` (which may itself be an exception).

    ``traceback`` snapshots an exception value's traceback at settlement so
    re-raising always starts from the same frames.
    """

    value: T
    traceback: TracebackType | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Raised:
    """Resolving the payload raised ``error``, or the payload was cancelled."""

    error: BaseException
    traceback: TracebackType | None = None


Outcome = Settled[Any] | Raised


def _settled(value: Any) -> Settled[Any]:
    if isinstance(value, BaseException):
        return Settled(value, value.__traceback__)
    return Settled(value)


def consume_future_exception(fut: asyncio.Future[Any]) -> None:
    """Avoid 'Future exception was never retrieved' for shared futures."""
    try:
        _ = fut.exception()
    except asyncio.CancelledError:
        return


def _observer_cancelling() -> bool:
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


class Deferred[T]:
    """Memoizing holder for a value or an awaitable producing one."""

    __slots__ = ("_future", "_outcome", "_source")

    def __init__(self, source: T | Awaitable[T]) -> None:
        self._future: asyncio.Future[T] | None = None
        self._source: Awaitable[T] | None = None
        self._outcome: Outcome | None = None
        if inspect.isawaitable(source):
            self._source = source
        else:
            self._outcome = _settled(source)

    def peek(self) -> Outcome | None:
        """Return the memoized outcome without suspending, or None if pending."""
        return self._outcome

    async def settle(self) -> Outcome:
        """Resolve once and return the memoized outcome.

        ``Exception`` raised by the payload is captured as ``Raised``, and so
        is the payload's own cancellation. Cancellation of the observer is
        never memoized and always propagates.
        """
        if self._outcome is not None:
            return self._outcome

        future = self._future
        if future is None:
            # Only the initial pending state reaches here, so _source is set.
            future = asyncio.ensure_future(cast("Awaitable[T]", self._source))
            future.add_done_callback(consume_future_exception)
            self._future = future
            self._source = None

        try:
            # Shielded: a cancelled observer must not cancel the shared work.
            value = await asyncio.shield(future)
        except asyncio.CancelledError as exc:
            if not future.cancelled() or _observer_cancelling():
                raise
            outcome: Outcome = self._fold(exc)
        except Exception as exc:
            outcome = self._fold(exc)
        else:
            outcome = _settled(value)

        if self._outcome is None:
            self._outcome = outcome
            self._future = None
        return self._outcome

    @staticmethod
    def _fold(exc: BaseException) -> Raised:
        if dev_trace_enabled():
            log.debug(
                "Pending payload raised %s; settling as failure",
                type(exc).__name__,
                exc_info=exc,
            )
        else:
            log.debug(
                "Pending payload raised %s; settling as failure", type(exc).__name__
            )
        return Raised(exc, exc.__traceback__)
