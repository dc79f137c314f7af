"""Internal helpers for development-time feature flags.

Centralizes how opt-in debugging toggles are read from the environment so the
semantics stay consistent across modules.
"""

from __future__ import annotations

import os

__all__ = ["dev_trace_enabled"]


def dev_trace_enabled(*, override: bool | None = None) -> bool:
    """Return True when tracebacks should accompany folded-failure logs.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``PENDING_RESULT_TRACE`` is exactly ``"1"``.

    Read on every call so tests can toggle it with ``monkeypatch``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("PENDING_RESULT_TRACE") == "1"
