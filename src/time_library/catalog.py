"""
Catalog of borrowable items for the Time Library.

The catalog owns its items in insertion order and never reorders or drops
them. Availability queries walk the whole collection and return a fresh
list, so callers get a point-in-time snapshot rather than a live view.
"""

import logging
from collections.abc import Iterator

from .exceptions import BookNotFoundError
from .models.capabilities import Borrowable

logger = logging.getLogger(__name__)


class Catalog:
    """An ordered, append-only collection of Borrowable items."""

    def __init__(self) -> None:
        self._items: list[Borrowable] = []

    def add(self, item: Borrowable) -> None:
        """Append ``item``. The item's timeline is not validated."""
        self._items.append(item)
        logger.debug("Added %r to catalog (%d items)", item.title, len(self._items))

    def available_in_year(self, year: int) -> list[Borrowable]:
        """Items available in ``year``, in insertion order."""
        return [item for item in self._items if item.is_available_at(year)]

    def find_by_title(self, title: str) -> Borrowable:
        """
        Return the first item whose title matches exactly.

        Raises:
            BookNotFoundError: If no item carries ``title``
        """
        for item in self._items:
            if item.title == title:
                return item
        raise BookNotFoundError(title)

    @property
    def books(self) -> tuple[Borrowable, ...]:
        """Snapshot of every item in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Borrowable]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Borrowable:
        return self._items[index]
