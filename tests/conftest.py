from pathlib import Path

import pytest

from tsprimer.models import Book, Product, load_books_from_toml_file, load_products_from_toml_file

CATALOG_FILE = Path(__file__).parent / "data" / "catalog-test.toml"

assert CATALOG_FILE.exists()


@pytest.fixture
def catalog_file() -> Path:
    return CATALOG_FILE


@pytest.fixture
def books() -> list[Book]:
    return load_books_from_toml_file(CATALOG_FILE)


@pytest.fixture
def products() -> list[Product]:
    return load_products_from_toml_file(CATALOG_FILE)
