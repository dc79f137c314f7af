"""pending-result: an awaitable-aware Result type for asyncio code.

Public API:
    - Result: Ok payload or Err exception, possibly still pending
    - Ok(), Err(): Constructor shorthands
    - Option, Some, Nothing: Present/absent values used by ok()/err()/transpose()
    - UnwrapError: Wrong-variant failure
"""

from __future__ import annotations

import logging

from pending_result.errors import UnwrapError
from pending_result.option import Nothing, Option, Some
from pending_result.result import Err, Ok, Result, is_error_value

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("pending-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("pending_result").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "is_error_value",
]
