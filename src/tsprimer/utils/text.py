__all__ = [
    "format_string",
    "process_value",
]
from numbers import Real
from typing import Annotated

from typing_extensions import Doc


def format_string(
    text: Annotated[str, Doc("The string to format.")],
    to_upper: Annotated[bool | None, Doc("Convert to lowercase only if explicitly `False`.")] = None,
) -> str:
    """Change the case of a string, defaulting to uppercase."""
    return text.lower() if to_upper is False else text.upper()


def process_value(
    value: Annotated[str | float, Doc("A string or a number.")],
) -> Annotated[float, Doc("The length of a string, or twice the value of a number.")]:
    if isinstance(value, str):
        return len(value)
    # bool is a subclass of int but is not a number here
    if isinstance(value, Real) and not isinstance(value, bool):
        return value * 2
    msg = f"Expected a string or a number, got {type(value).__name__}"
    raise TypeError(msg)
