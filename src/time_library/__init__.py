"""
Time Library.

A catalog of books that exist across spans of years and can be checked out
and returned in individual years.

Key Components:
- models: Timeline, the Temporal/Borrowable capabilities and Book
- catalog: ordered collection with per-year availability queries
- exceptions: circulation error taxonomy
- circulation: desk operations returning structured results
- config: settings with pydantic-settings
"""

__version__ = "0.1.0"

from .catalog import Catalog
from .exceptions import (
    AlreadyCheckedOutError,
    BookNotFoundError,
    CirculationError,
    CirculationErrorKind,
    NotCheckedOutError,
    NotExistentError,
)
from .models import Book, Borrowable, Temporal, Timeline

__all__ = [
    "AlreadyCheckedOutError",
    "Book",
    "BookNotFoundError",
    "Borrowable",
    "Catalog",
    "CirculationError",
    "CirculationErrorKind",
    "NotCheckedOutError",
    "NotExistentError",
    "Temporal",
    "Timeline",
    "__version__",
]
