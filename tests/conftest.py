"""Pytest configuration and fixtures.

Marker registration and environment isolation live in ``tests/fixtures/core.py``;
this file holds the shared test doubles.
"""

from __future__ import annotations

import pytest

from tests.helpers import CallSpy

pytest_plugins = ["tests.fixtures.core"]


@pytest.fixture
def spy() -> CallSpy:
    """A fresh call-recording callable."""
    return CallSpy()


@pytest.fixture
def boom() -> ValueError:
    """A representative modeled failure."""
    return ValueError("Something went wrong")
