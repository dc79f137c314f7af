from __future__ import annotations

import logging

import pytest

from pending_result import Err, Nothing, Ok, Option, Result, Some
from tests.helpers import failing, later

pytestmark = pytest.mark.unit


async def _inner(option: Option[Result[object]]) -> tuple[bool, object]:
    result = option.unwrap()
    if await result.is_ok():
        return True, await result.unwrap()
    return False, await result.unwrap_err()


@pytest.mark.asyncio
async def test_some_becomes_some_ok() -> None:
    transposed = await Ok(Some(1)).transpose()

    assert transposed.is_some()
    assert await _inner(transposed) == (True, 1)


@pytest.mark.asyncio
async def test_pending_some_becomes_some_ok() -> None:
    transposed = await Ok(later(Some("x"))).transpose()

    assert await _inner(transposed) == (True, "x")


@pytest.mark.asyncio
async def test_nothing_stays_nothing() -> None:
    assert await Ok(Nothing()).transpose() == Nothing()


@pytest.mark.asyncio
async def test_err_becomes_some_err(boom: ValueError) -> None:
    transposed = await Err(boom).transpose()

    assert await _inner(transposed) == (False, boom)


@pytest.mark.asyncio
async def test_raising_payload_becomes_some_err(boom: ValueError) -> None:
    transposed = await Result.from_(failing(boom)).transpose()

    assert await _inner(transposed) == (False, boom)


@pytest.mark.asyncio
async def test_non_option_payload_yields_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pending_result.result"):
        transposed = await Ok(1).transpose()

    assert transposed == Nothing()
    assert "non-Option payload of type int" in caplog.text
