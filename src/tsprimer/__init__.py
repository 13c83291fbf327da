"""Package initialization module for tsprimer."""

__all__ = [
    "InvalidInputError",
    "__version__",
    "report_square",
    "square_async",
]
import importlib.metadata

from .computation import InvalidInputError, report_square, square_async

__version__ = importlib.metadata.version("tsprimer")
