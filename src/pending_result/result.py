"""Result: an Ok payload or an Err exception, possibly still pending.

A ``Result`` wraps a payload that may be a plain value or any awaitable. Its
state is structural: once resolved, a payload that is an ``Exception`` makes
the result Err, anything else makes it Ok. An awaitable that raises, or
is itself cancelled, while being resolved also makes the result Err, carrying
the raised exception.

Every method is a coroutine because resolution may suspend.

Example:
    async def load(path: str) -> bytes: ...

    data = Result.from_(load("config.toml"))
    if await data.is_ok():
        print(len(await data.unwrap()))
    else:
        print(await data.unwrap_err())
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, cast

from pending_result._deferred import Deferred, Raised
from pending_result.errors import UnwrapError
from pending_result.option import Nothing, Option, Some

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

log = logging.getLogger(__name__)


def is_error_value(value: object) -> bool:
    """Return True when a resolved payload counts as a failure."""
    return isinstance(value, Exception)


async def _maybe_await[T](value: T | Awaitable[T]) -> T:
    if inspect.isawaitable(value):
        return await value
    return cast("T", value)


class Result[Payload]:
    """Either an Ok payload or an Err exception.

    Construct with ``Result.from_``, ``Result.Ok`` or ``Result.Err`` (also
    available as the module-level ``Ok`` and ``Err``). Instances are never
    mutated by combinators; resolving a pending payload is memoized so the
    underlying computation runs at most once.
    """

    __slots__ = ("_payload",)

    def __init__(self, payload: Payload | Awaitable[Payload]) -> None:
        self._payload: Deferred[Payload] = Deferred(payload)

    # --- Construction ---

    @classmethod
    def from_(cls, payload: Any) -> Result[Any]:
        """Wrap an unknown payload, classifying it once resolved.

        - An ``Exception`` (or an awaitable resolving to one) yields Err.
        - An awaitable that raises yields Err carrying the raised exception.
        - Anything else, including ``None``, yields Ok.

        Example:
            await Result.from_(1).is_ok()                   # True
            await Result.from_(ValueError("boom")).is_err()  # True
        """
        return cls(payload)

    @classmethod
    def Ok[V](cls, payload: V | Awaitable[V]) -> Result[V]:  # noqa: N802
        """Wrap a payload the caller knows is not an exception."""
        return cls(payload)  # type: ignore[arg-type]

    @classmethod
    def Err(cls, error: Exception | Awaitable[Exception]) -> Result[Any]:  # noqa: N802
        """Wrap an exception (or an awaitable producing one) as a failure.

        Raises:
            TypeError: ``error`` is neither an exception nor awaitable.
        """
        if not (is_error_value(error) or inspect.isawaitable(error)):
            raise TypeError(
                f"Err() expects an Exception instance, got {type(error).__name__}"
            )
        return cls(error)

    # --- Resolution ---

    async def _resolve(self) -> tuple[bool, Any]:
        """Return ``(is_err, value)``, folding a raising payload into Err."""
        outcome = await self._payload.settle()
        if isinstance(outcome, Raised):
            return True, outcome.error
        return is_error_value(outcome.value), outcome.value

    def _rewound(self, error: BaseException) -> BaseException:
        """Reset ``error`` to the traceback it had when the payload settled.

        Re-raising a memoized error otherwise stacks new frames onto its
        ``__traceback__`` on every call.
        """
        outcome = self._payload.peek()
        return error.with_traceback(outcome.traceback if outcome else None)

    async def sync(self) -> Result[Payload]:
        """Resolve and memoize the payload, returning ``self``.

        Never raises for a failing payload; the failure is kept as Err.
        """
        await self._payload.settle()
        return self

    # --- State inspection ---

    async def is_err(self) -> bool:
        """Return True if the result is Err, including a payload that raised."""
        is_err, _ = await self._resolve()
        return is_err

    async def is_ok(self) -> bool:
        """Return True if the result is Ok."""
        is_err, _ = await self._resolve()
        return not is_err

    async def ok(self) -> Option[Payload]:
        """Convert to ``Some(payload)``, discarding the error if any."""
        is_err, value = await self._resolve()
        if is_err:
            return Nothing()
        return Some(value)

    async def err(self) -> Option[BaseException]:
        """Convert to ``Some(error)``, discarding the payload if any."""
        is_err, value = await self._resolve()
        if is_err:
            return Some(value)
        return Nothing()

    # --- Transform combinators ---

    async def map[V](
        self, fn: Callable[[Payload], V | Awaitable[V]]
    ) -> Result[V] | Result[Payload]:
        """Apply ``fn`` to an Ok payload, leaving Err untouched.

        The value returned by ``fn`` is wrapped as-is; when it is awaitable it
        becomes the new result's pending payload. ``fn`` is never called for
        Err, and an exception it raises synchronously is not caught.

        Example:
            doubled = await Result.Ok(2).map(lambda v: v * 2)
            await doubled.unwrap()  # 4
        """
        is_err, value = await self._resolve()
        if is_err:
            return self
        return Result.Ok(fn(value))

    async def map_or_else[V](
        self,
        fallback: Callable[[], V | Awaitable[V]],
        fn: Callable[[Payload], V | Awaitable[V]],
    ) -> Result[V]:
        """Apply ``fn`` to an Ok payload, or compute ``fallback()`` for Err.

        The outcome is always built with ``Result.Ok``. If ``fn`` or
        ``fallback`` produces an exception object, the new result still
        resolves as Err because state is read from the payload's type.
        """
        is_err, value = await self._resolve()
        if is_err:
            return Result.Ok(fallback())
        return Result.Ok(fn(value))

    async def map_err(
        self, fn: Callable[[BaseException], Any]
    ) -> Result[Payload] | Result[Any]:
        """Apply ``fn`` to an Err error, returning Ok results unchanged.

        The value returned by ``fn`` is classified like ``Result.from_``: an
        exception keeps the result Err, anything else makes it Ok.

        Example:
            err = Result.Err(ValueError("boom"))
            wrapped = await err.map_err(lambda e: RuntimeError(f"load: {e}"))
        """
        is_err, value = await self._resolve()
        if not is_err:
            return self
        return Result.from_(fn(value))

    # --- Combination combinators ---

    async def and_[T](self, b: Result[T]) -> Result[T] | Result[Payload]:
        """Return ``b`` if this result is Ok, otherwise this Err.

        ``b`` is not inspected when this result is Err.
        """
        if await self.is_err():
            return self
        return b

    async def or_[T](self, b: Result[T]) -> Result[Payload] | Result[T]:
        """Return this result if Ok, otherwise ``b`` whatever its state."""
        if await self.is_ok():
            return self
        return b

    async def or_else[T](
        self, fn: Callable[[], Result[T] | Awaitable[Result[T]]]
    ) -> Result[Payload] | Result[T]:
        """Return this result if Ok, otherwise the result computed by ``fn``.

        ``fn`` is only called when this result is Err.
        """
        if await self.is_ok():
            return self
        return await _maybe_await(fn())

    # --- Terminal extraction ---

    async def unwrap(self) -> Payload:
        """Return the Ok payload.

        Raises:
            BaseException: The wrapped error itself when the result is Err,
                starting from the traceback it had when the payload settled.
        """
        is_err, value = await self._resolve()
        if is_err:
            raise self._rewound(value)
        return value

    async def expect(self, message: str) -> Payload:
        """Return the Ok payload, or raise ``UnwrapError(message)`` for Err.

        The original error is chained as ``__cause__``; only ``message`` is
        used as the raised error's content.
        """
        is_err, value = await self._resolve()
        if is_err:
            raise UnwrapError(message) from self._rewound(value)
        return value

    async def unwrap_err(self) -> BaseException:
        """Return the Err error.

        For an Ok result the wrong-variant ``UnwrapError``, built from the
        payload's string form, is returned rather than raised.
        """
        is_err, value = await self._resolve()
        if is_err:
            return value
        return UnwrapError(str(value), hint="called unwrap_err() on an Ok result")

    async def expect_err(self, message: str) -> BaseException:
        """Return the Err error, or ``UnwrapError(message)`` for Ok (returned, not raised)."""
        is_err, value = await self._resolve()
        if is_err:
            return value
        return UnwrapError(message, hint="called expect_err() on an Ok result")

    async def unwrap_or[D](self, fallback: D) -> Payload | D:
        """Return the Ok payload, or ``fallback`` for Err."""
        is_err, value = await self._resolve()
        if is_err:
            return fallback
        return value

    async def unwrap_or_else[D](
        self, fn: Callable[[BaseException], D | Awaitable[D]]
    ) -> Payload | D:
        """Return the Ok payload, or ``fn(error)`` (awaited if needed) for Err."""
        is_err, value = await self._resolve()
        if is_err:
            return await _maybe_await(fn(value))
        return value

    # --- Nesting ---

    async def transpose(self) -> Option[Result[Any]]:
        """Swap ``Result[Option[T]]`` into ``Option[Result[T]]``.

        - ``Some(v)`` becomes ``Some(Ok(v))``.
        - ``Nothing()`` stays ``Nothing()``.
        - Err (including a payload that raised or was cancelled) becomes
          ``Some(err_result)`` holding this same Err.
        - Any other payload is not an Option and yields ``Nothing()``.
        """
        is_err, value = await self._resolve()
        if is_err:
            return Some(self)
        if isinstance(value, Some):
            return Some(Result.Ok(value.value))
        if not isinstance(value, Option):
            log.debug(
                "transpose() on a non-Option payload of type %s; returning Nothing",
                type(value).__name__,
            )
        return Nothing()

    def __repr__(self) -> str:
        outcome = self._payload.peek()
        if outcome is None:
            return "Result(<pending>)"
        if isinstance(outcome, Raised):
            return f"Err({outcome.error!r})"
        if is_error_value(outcome.value):
            return f"Err({outcome.value!r})"
        return f"Ok({outcome.value!r})"


def Ok[V](payload: V | Awaitable[V]) -> Result[V]:  # noqa: N802
    """Shorthand for ``Result.Ok(payload)``."""
    return Result.Ok(payload)


def Err(error: Exception | Awaitable[Exception]) -> Result[Any]:  # noqa: N802
    """Shorthand for ``Result.Err(error)``."""
    return Result.Err(error)
