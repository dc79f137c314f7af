"""Exception raised on the wrong-variant path."""

from __future__ import annotations


class UnwrapError(Exception):
    """A value was extracted from the variant that does not hold it.

    Raised by ``Result.expect()`` and ``Option.unwrap()``; returned (not
    raised) by ``Result.unwrap_err()`` and ``Result.expect_err()``.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint
