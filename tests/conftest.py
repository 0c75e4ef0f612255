"""Test configuration and fixtures for the Time Library.

Fixtures provide:
1. Configuration isolation - every test starts from default settings
2. The two books of the demo scenario, freshly built per test
3. A catalog holding both books in insertion order
"""

import os
from collections.abc import Generator

import pytest

from time_library.catalog import Catalog
from time_library.config import LibrarySettings, reset_config
from time_library.models import Book

# === Environment Fixtures ===


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment without TIME_LIBRARY_* variables.

    Settings are cached in a singleton, so the cache is reset on both
    sides of the test as well.
    """
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("TIME_LIBRARY_"):
            del os.environ[key]
    reset_config()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_config()


# === Configuration Fixtures ===


@pytest.fixture
def test_config() -> Generator[LibrarySettings, None, None]:
    """Provide test-specific settings with verbose logging."""
    reset_config()

    config = LibrarySettings(
        library_name="test-time-library",
        debug=True,
        log_level="DEBUG",
    )

    yield config

    reset_config()


# === Catalog Fixtures ===


@pytest.fixture
def time_machine() -> Book:
    """A book that has existed since 1895 and still exists."""
    return Book.create("The Time Machine", "H. G. Wells", 1895)


@pytest.fixture
def cardenio() -> Book:
    """A book that only existed in 1613."""
    return Book.create("Cardenio", "William Shakespeare", 1613, 1613)


@pytest.fixture
def catalog(time_machine: Book, cardenio: Book) -> Catalog:
    """A catalog holding The Time Machine followed by Cardenio."""
    catalog = Catalog()
    catalog.add(time_machine)
    catalog.add(cardenio)
    return catalog
