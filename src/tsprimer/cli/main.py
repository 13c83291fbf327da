import importlib.metadata
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from .demo import main as demo_main
from .square import main as square_main

app = typer.Typer()

console_err = Console(stderr=True)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        version = importlib.metadata.version("tsprimer")
        typer.echo(f"TSPRIMER CLI {version}")
        raise typer.Exit


def _configure_logging(log_level: str) -> None:
    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        msg = f"Unknown log level: {log_level}"
        raise typer.BadParameter(msg, param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console_err, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", help="Show version information", is_eager=True, callback=_version_callback),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (e.g., 'DEBUG', 'INFO')", show_default=True),
    ] = "WARNING",
) -> None:
    """TSPRIMER CLI."""
    _configure_logging(log_level)


app.command("demo")(demo_main)
app.command("square", context_settings={"ignore_unknown_options": True})(square_main)
