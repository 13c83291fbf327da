__all__ = [
    "NEGATIVE_NUMBER_MESSAGE",
    "SQUARE_DELAY",
    "InvalidInputError",
    "report_square",
    "square_async",
]
import asyncio
import logging
from typing import Annotated, Any, Self

from typing_extensions import Doc, override

logger = logging.getLogger(__name__)

SQUARE_DELAY = 1.0  # [s]
NEGATIVE_NUMBER_MESSAGE = "Error: Negative number not allowed"


class InvalidInputError(ValueError):
    """Raised when a computation receives an input outside of its domain."""

    def __init__(self, value: float, message: str = NEGATIVE_NUMBER_MESSAGE) -> None:
        super().__init__(message)
        self.value = value

    def __reduce__(self) -> tuple[type[Self], tuple[float, str]]:
        return type(self), (self.value, str(self))


class _NonCancellableFuture(asyncio.Future[float]):
    # Once created, the result is always delivered by the timer or the immediate rejection.
    @override
    def cancel(self, msg: Any | None = None) -> bool:
        return False


def square_async(
    n: Annotated[float, Doc("The number to square. Must be non-negative.")],
    *,
    delay: Annotated[float, Doc("Time to wait before resolving a successful result [s].")] = SQUARE_DELAY,
) -> Annotated[asyncio.Future[float], Doc("Deferred result that resolves with `n * n`.")]:
    """Square a number after a fixed delay.

    Must be called from a running event loop.
    The input is validated before anything is scheduled: for a negative `n` the returned future has already
    failed with `InvalidInputError` when this function returns, so awaiting it raises without waiting for `delay`.
    Otherwise a one-shot timer resolves the future with `n * n` once `delay` has elapsed.

    The returned future cannot be cancelled; `cancel()` returns `False` and leaves it pending.
    """
    if delay < 0:
        msg = f"delay must be non-negative, got {delay}"
        raise ValueError(msg)

    loop = asyncio.get_running_loop()
    future = _NonCancellableFuture(loop=loop)

    if n >= 0:
        logger.debug("Scheduling square of %s in %s s", n, delay)
        loop.call_later(delay, future.set_result, n * n)
    else:
        future.set_exception(InvalidInputError(n))

    return future


async def report_square(
    n: Annotated[float, Doc("The number to square.")],
    *,
    delay: Annotated[float, Doc("Time to wait before resolving a successful result [s].")] = SQUARE_DELAY,
) -> Annotated[float | None, Doc("The square of `n`, or `None` if the input was rejected.")]:
    """Await `square_async` and log its outcome."""
    try:
        result = await square_async(n, delay=delay)
    except InvalidInputError as e:
        logger.error("%s", e)  # noqa: TRY400
        return None
    logger.info("Square of %s: %s", n, result)
    return result
