import asyncio
import logging
from typing import Annotated, NoReturn

import typer
from rich.console import Console

from tsprimer.computation import SQUARE_DELAY, InvalidInputError, square_async

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


async def _square(n: float, delay: float) -> float:
    return await square_async(n, delay=delay)


def main(
    n: Annotated[float, typer.Argument(help="Number to square. Negative numbers are rejected.")],
    delay: Annotated[
        float,
        typer.Option("--delay", help="Delay before the result is available (s)", min=0, show_default=True),
    ] = SQUARE_DELAY,
) -> NoReturn:
    """Compute the square of a number asynchronously."""
    try:
        result = asyncio.run(_square(n, delay))
    except InvalidInputError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from None

    console.print(format_number(result))
    raise typer.Exit
