import asyncio
import logging
import tomllib
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.pretty import Pretty

from tsprimer.computation import NEGATIVE_NUMBER_MESSAGE, SQUARE_DELAY, report_square
from tsprimer.models import (
    DEFAULT_BOOKS,
    DEFAULT_PRODUCTS,
    Book,
    Car,
    Day,
    Product,
    get_day_type,
    load_books_from_toml_file,
    load_products_from_toml_file,
)
from tsprimer.utils.sequences import concatenate_arrays, filter_by_rating, get_most_expensive_product
from tsprimer.utils.text import format_string, process_value

from .square import format_number

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


def _load_data(data_path: Path | None) -> tuple[list[Book], list[Product]]:
    if data_path is None:
        return list(DEFAULT_BOOKS), list(DEFAULT_PRODUCTS)
    try:
        books = load_books_from_toml_file(data_path)
        products = load_products_from_toml_file(data_path)
    except (OSError, tomllib.TOMLDecodeError, KeyError, ValidationError) as e:
        msg = f"Cannot load the data file: {e}"
        raise typer.BadParameter(msg, param_hint="--data") from None
    return books, products


def main(
    data_path: Annotated[
        Path | None,
        typer.Option(
            "--data",
            help="Path to a TOML file with `books` and `products` tables. If not provided, built-in samples are used",
        ),
    ] = None,
    delay: Annotated[
        float,
        typer.Option("--delay", help="Delay of the asynchronous square computation (s)", min=0, show_default=True),
    ] = SQUARE_DELAY,
    square_input: Annotated[
        float,
        typer.Option("--square-input", help="Input of the asynchronous square computation", show_default=True),
    ] = -4,
) -> NoReturn:
    """Run every demonstration in order and print the results."""
    books, products = _load_data(data_path)

    console.rule("format_string")
    console.print(format_string("HELLO", to_upper=False))

    console.rule("filter_by_rating")
    console.print(Pretty(filter_by_rating(books)))

    console.rule("concatenate_arrays")
    console.print(Pretty(concatenate_arrays([1, 2, 3, 4], [2, 3, 4, 5])))

    console.rule("Vehicle / Car")
    my_car = Car(make="Toyota", year=2020, model="Corolla")
    console.print(my_car.get_info())
    console.print(my_car.get_model())

    console.rule("process_value")
    console.print(process_value(10))
    console.print(process_value("hello"))

    console.rule("get_most_expensive_product")
    console.print(len(products))
    console.print(Pretty(get_most_expensive_product(products)))

    console.rule("get_day_type")
    console.print(get_day_type(Day.SUNDAY))

    console.rule("square_async")
    result = asyncio.run(report_square(square_input, delay=delay))
    if result is None:
        err_console.print(f"[red]{NEGATIVE_NUMBER_MESSAGE}[/red]")
    else:
        console.print(format_number(result))

    raise typer.Exit
