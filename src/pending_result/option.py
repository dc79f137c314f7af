"""Option: a present (``Some``) or absent (``Nothing``) value.

Kept deliberately small; it exists so ``Result.ok()``, ``Result.err()`` and
``Result.transpose()`` have something to project into.

Example:
    Some(1).unwrap_or(0)     # 1
    Nothing().unwrap_or(0)   # 0
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pending_result.errors import UnwrapError


class Option[T]:
    """Common base of ``Some`` and ``Nothing``."""

    __slots__ = ()

    @staticmethod
    def some[V](value: V) -> Some[V]:
        return Some(value)

    @staticmethod
    def none() -> Nothing:
        return Nothing()

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return not self.is_some()

    def unwrap(self) -> T:
        """Return the contained value, raising ``UnwrapError`` on ``Nothing``."""
        if isinstance(self, Some):
            return self.value
        raise UnwrapError(
            "called unwrap() on Nothing",
            hint="Check is_some() first or use unwrap_or().",
        )

    def unwrap_or[D](self, default: D) -> T | D:
        if isinstance(self, Some):
            return self.value
        return default


@dataclasses.dataclass(frozen=True, slots=True)
class Some[T](Option[T]):
    """A present value."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Nothing(Option[Any]):
    """An absent value. All instances compare equal."""
