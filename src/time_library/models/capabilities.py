"""
Capability interfaces for items that live in time.

Temporal describes anything with an existence interval. Borrowable builds
on it: an item can only be borrowed in a year it exists in.
"""

from abc import ABC, abstractmethod

from .timeline import Timeline


class Temporal(ABC):
    """Anything that exists across one span of years."""

    @abstractmethod
    def get_timeline(self) -> Timeline:
        """Return the item's existence interval."""

    def exists_at(self, year: int) -> bool:
        """Check whether the item exists in ``year``."""
        return self.get_timeline().exists_at(year)


class Borrowable(Temporal):
    """
    A Temporal item that can be checked out and returned per year.

    Each year is an independent two-state machine, Available or CheckedOut.
    Implementations raise a CirculationError subclass for any transition the
    current state does not allow, and must check existence before
    availability. Catalog lookups and reports identify items by ``title``.
    """

    title: str

    @abstractmethod
    def is_available_at(self, year: int) -> bool:
        """True if the item exists in ``year`` and is not checked out."""

    @abstractmethod
    def checkout_at(self, year: int) -> None:
        """Move ``year`` from Available to CheckedOut."""

    @abstractmethod
    def return_at(self, year: int) -> None:
        """Move ``year`` from CheckedOut back to Available."""
