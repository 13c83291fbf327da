__all__ = [
    "DEFAULT_BOOKS",
    "DEFAULT_PRODUCTS",
    "Book",
    "Product",
    "load_books_from_toml_file",
    "load_products_from_toml_file",
]
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Book(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    rating: float


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: float


DEFAULT_BOOKS = (
    Book(title="Book A", rating=4.5),
    Book(title="Book B", rating=3.2),
    Book(title="Book C", rating=5.0),
)

DEFAULT_PRODUCTS = (
    Product(name="Pen", price=10),
    Product(name="Notebook", price=25),
    Product(name="Bag", price=50),
)


def _load_toml_file(toml_file_path: Path | str) -> dict[str, Any]:
    toml_file_path = Path(toml_file_path)
    logger.debug("Loading TOML file from %s", toml_file_path)
    with toml_file_path.open("rb") as f:
        return tomllib.load(f)


def load_books_from_toml_file(toml_file_path: Path | str) -> list[Book]:
    """Load books from the `[[books]]` array of a TOML file."""
    return [Book.model_validate(item) for item in _load_toml_file(toml_file_path)["books"]]


def load_products_from_toml_file(toml_file_path: Path | str) -> list[Product]:
    """Load products from the `[[products]]` array of a TOML file."""
    return [Product.model_validate(item) for item in _load_toml_file(toml_file_path)["products"]]
