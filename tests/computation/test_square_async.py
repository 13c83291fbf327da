import asyncio
import copy
import gc
import logging
import pickle
from collections.abc import Callable
from typing import Any

import pytest

from tsprimer.computation import (
    NEGATIVE_NUMBER_MESSAGE,
    SQUARE_DELAY,
    InvalidInputError,
    report_square,
    square_async,
)

DELAY = 0.05  # [s]
TOLERANCE = 1e-3  # [s], timers may fire within the clock resolution


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, 0),
        (2, 4),
        (3, 9),
        (1.5, 2.25),
    ],
)
async def test_square_async_resolves_after_delay(n: float, expected: float) -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()
    assert await square_async(n, delay=DELAY) == expected
    assert loop.time() - start >= DELAY - TOLERANCE


@pytest.mark.asyncio
async def test_square_async_default_delay() -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()
    assert await square_async(5) == 25
    assert loop.time() - start >= SQUARE_DELAY - TOLERANCE


@pytest.mark.asyncio
async def test_square_async_pending_until_timer_fires() -> None:
    future = square_async(5, delay=DELAY)
    assert not future.done()
    await asyncio.sleep(DELAY * 2)
    assert future.done()
    assert future.result() == 25


@pytest.mark.asyncio
@pytest.mark.parametrize("n", [-4, -1, -0.5])
async def test_square_async_rejects_negative_without_waiting(n: float) -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()
    future = square_async(n, delay=10)
    # Rejected before the call returns
    assert future.done()
    with pytest.raises(InvalidInputError, match=f"^{NEGATIVE_NUMBER_MESSAGE}$") as exc_info:
        await future
    assert exc_info.value.value == n
    assert loop.time() - start < 1


@pytest.mark.asyncio
async def test_square_async_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Negative number not allowed"):
        await square_async(-4, delay=DELAY)


@pytest.mark.asyncio
async def test_square_async_repeated_invocations() -> None:
    results = await asyncio.gather(*(square_async(7, delay=DELAY) for _ in range(3)))
    assert results == [49, 49, 49]

    for _ in range(3):
        with pytest.raises(InvalidInputError):
            await square_async(-7, delay=DELAY)


@pytest.mark.asyncio
async def test_square_async_cannot_be_cancelled() -> None:
    future = square_async(3, delay=DELAY)
    assert future.cancel() is False
    assert not future.cancelled()
    assert await future == 9


@pytest.mark.asyncio
async def test_cancelled_waiter_stops_only_after_future_completes() -> None:
    loop = asyncio.get_running_loop()
    start = loop.time()
    future = square_async(4, delay=DELAY)

    async def _wait() -> float:
        return await future

    task = asyncio.create_task(_wait())
    await asyncio.sleep(0)  # let the task block on the future
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert future.result() == 16
    assert loop.time() - start >= DELAY - TOLERANCE


@pytest.mark.asyncio
async def test_square_async_rejects_negative_delay() -> None:
    with pytest.raises(ValueError, match="delay must be non-negative"):
        square_async(3, delay=-1)


def test_square_async_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        square_async(3)


def test_unretrieved_failure_is_reported() -> None:
    contexts: list[dict[str, Any]] = []

    async def _main() -> None:
        asyncio.get_running_loop().set_exception_handler(lambda _loop, context: contexts.append(context))
        future = square_async(-4)
        del future
        gc.collect()

    asyncio.run(_main())

    assert len(contexts) == 1
    assert isinstance(contexts[0]["exception"], InvalidInputError)


@pytest.mark.asyncio
async def test_report_square_success(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="tsprimer.computation"):
        assert await report_square(5, delay=DELAY) == 25
    assert "Square of 5: 25" in caplog.text


@pytest.mark.asyncio
async def test_report_square_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="tsprimer.computation"):
        assert await report_square(-4, delay=DELAY) is None
    assert [record.getMessage() for record in caplog.records] == [NEGATIVE_NUMBER_MESSAGE]
    assert caplog.records[0].levelno == logging.ERROR


@pytest.mark.parametrize("clone", [copy.copy, lambda e: pickle.loads(pickle.dumps(e))])  # noqa: S301
def test_invalid_input_error_keeps_value_and_message(clone: Callable[[Exception], Exception]) -> None:
    error = clone(InvalidInputError(-4, "custom message"))
    assert isinstance(error, InvalidInputError)
    assert error.value == -4
    assert str(error) == "custom message"
