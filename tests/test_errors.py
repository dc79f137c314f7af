from __future__ import annotations

import logging

import pytest

import pending_result
from pending_result import UnwrapError

pytestmark = pytest.mark.unit


def test_unwrap_error_message_and_hint() -> None:
    err = UnwrapError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"
    assert isinstance(err, Exception)


def test_unwrap_error_hint_defaults_to_none() -> None:
    assert UnwrapError("fail").hint is None


def test_package_logger_is_silent_by_default() -> None:
    handlers = logging.getLogger("pending_result").handlers

    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_public_surface() -> None:
    assert set(pending_result.__all__) == {
        "Err",
        "Nothing",
        "Ok",
        "Option",
        "Result",
        "Some",
        "UnwrapError",
        "is_error_value",
    }
    assert isinstance(pending_result.__version__, str)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (ValueError("x"), True),
        (KeyError("k"), True),
        ("error", False),
        (None, False),
        (ValueError, False),
    ],
)
def test_is_error_value(value: object, expected: bool) -> None:
    assert pending_result.is_error_value(value) is expected
