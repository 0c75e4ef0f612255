"""
Time Library models.

Pydantic models and capability interfaces for items that exist across time:

- Timeline: inclusive existence interval in whole years
- Temporal / Borrowable: capability interfaces
- Book: the concrete borrowable item
"""

from .book import Book
from .capabilities import Borrowable, Temporal
from .timeline import Timeline

__all__ = [
    "Book",
    "Borrowable",
    "Temporal",
    "Timeline",
]
