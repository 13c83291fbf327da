__all__ = [
    "DEFAULT_BOOKS",
    "DEFAULT_PRODUCTS",
    "Book",
    "Car",
    "Day",
    "Product",
    "Vehicle",
    "get_day_type",
    "load_books_from_toml_file",
    "load_products_from_toml_file",
]

from .catalog import (
    DEFAULT_BOOKS,
    DEFAULT_PRODUCTS,
    Book,
    Product,
    load_books_from_toml_file,
    load_products_from_toml_file,
)
from .day import Day, get_day_type
from .vehicle import Car, Vehicle
