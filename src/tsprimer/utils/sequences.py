__all__ = [
    "concatenate_arrays",
    "filter_by_rating",
    "get_most_expensive_product",
]
from collections.abc import Iterable, Sequence
from itertools import chain
from typing import TypeVar

from tsprimer.models import Book, Product

MIN_RATING = 4.0

T = TypeVar("T")


def filter_by_rating(items: Iterable[Book], min_rating: float = MIN_RATING) -> list[Book]:
    """Keep the books rated at least `min_rating`, in their original order."""
    return [item for item in items if item.rating >= min_rating]


def concatenate_arrays(*arrays: Sequence[T]) -> list[T]:
    return list(chain.from_iterable(arrays))


def get_most_expensive_product(products: Iterable[Product]) -> Product | None:
    """Return the product with the highest price.

    The first one wins on a tie. Returns `None` if there is no product.
    """
    most_expensive: Product | None = None
    for product in products:
        if most_expensive is None or product.price > most_expensive.price:
            most_expensive = product
    return most_expensive
