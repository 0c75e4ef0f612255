"""
Error taxonomy for the Time Library.

Every checkout or return that breaks a circulation rule raises one of the
CirculationError subclasses below. They are all recoverable: the core raises
them to its immediate caller and leaves the checkout history untouched.

- NotExistentError: the year lies outside the book's existence interval
- AlreadyCheckedOutError: checkout on a year where the book is unavailable
- NotCheckedOutError: return on a year where the book was never checked out
"""

from enum import Enum


class CirculationErrorKind(str, Enum):
    """Which circulation rule a rejected transition violated."""

    NOT_EXISTENT = "not_existent"
    ALREADY_CHECKED_OUT = "already_checked_out"
    NOT_CHECKED_OUT = "not_checked_out"


class CirculationError(Exception):
    """Base exception for rejected checkout/return transitions."""

    kind: CirculationErrorKind

    def __init__(self, title: str, year: int, message: str):
        super().__init__(message)
        self.title = title
        self.year = year
        self.message = message


class NotExistentError(CirculationError):
    """Raised when a transition targets a year the book does not exist in."""

    kind = CirculationErrorKind.NOT_EXISTENT

    def __init__(self, title: str, year: int):
        super().__init__(title, year, f"'{title}' doesn't exist in year {year}")


class AlreadyCheckedOutError(CirculationError):
    """Raised when checking out a book that is already out that year."""

    kind = CirculationErrorKind.ALREADY_CHECKED_OUT

    def __init__(self, title: str, year: int):
        super().__init__(title, year, f"'{title}' is already checked out in year {year}")


class NotCheckedOutError(CirculationError):
    """Raised when returning a book that was not checked out that year."""

    kind = CirculationErrorKind.NOT_CHECKED_OUT

    def __init__(self, title: str, year: int):
        super().__init__(title, year, f"'{title}' wasn't checked out in year {year}")


class BookNotFoundError(LookupError):
    """Raised when a catalog lookup by title finds nothing."""

    def __init__(self, title: str):
        super().__init__(f"Book '{title}' not found in catalog")
        self.title = title
