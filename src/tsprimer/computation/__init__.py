__all__ = [
    "NEGATIVE_NUMBER_MESSAGE",
    "SQUARE_DELAY",
    "InvalidInputError",
    "report_square",
    "square_async",
]
from .square import NEGATIVE_NUMBER_MESSAGE, SQUARE_DELAY, InvalidInputError, report_square, square_async
