"""
Circulation desk for the Time Library.

The models raise on any rejected transition. Callers that want to report
outcomes rather than handle exceptions go through this desk instead:

1. checkout_book: look a book up by title and check it out for a year
2. return_book: look a book up by title and return it for a year

Both validate their input, log the outcome and hand back a
CirculationResult describing what happened.
"""

import logging
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, Field

from .catalog import Catalog
from .exceptions import BookNotFoundError, CirculationError, CirculationErrorKind
from .models.capabilities import Borrowable

logger = logging.getLogger(__name__)


class CirculationAction(str, Enum):
    """Transition requested at the desk."""

    CHECKOUT = "checkout"
    RETURN = "return"


class CirculationRequest(BaseModel):
    """Input schema shared by checkout and return."""

    title: str = Field(
        ...,
        description="Exact title of the book in the catalog",
        min_length=1,
        examples=["Cardenio", "The Time Machine"],
    )

    year: int = Field(
        ...,
        description="Year in which to check out or return the book",
        ge=0,
        examples=[1899, 1613],
    )


class CirculationResult(BaseModel):
    """Outcome of a desk operation."""

    action: CirculationAction
    title: str
    year: int
    success: bool
    error_kind: CirculationErrorKind | None = Field(
        default=None,
        description="Violated rule for rejected transitions; None on success or lookup failure",
    )
    message: str


def checkout_book(catalog: Catalog, title: str, year: int) -> CirculationResult:
    """
    Check out the book titled ``title`` for ``year``.

    Raises:
        pydantic.ValidationError: If ``title`` is empty or ``year`` negative
    """
    return _run(catalog, CirculationAction.CHECKOUT, title, year)


def return_book(catalog: Catalog, title: str, year: int) -> CirculationResult:
    """
    Return the book titled ``title`` for ``year``.

    Raises:
        pydantic.ValidationError: If ``title`` is empty or ``year`` negative
    """
    return _run(catalog, CirculationAction.RETURN, title, year)


def _run(catalog: Catalog, action: CirculationAction, title: str, year: int) -> CirculationResult:
    params = CirculationRequest(title=title, year=year)

    try:
        book = catalog.find_by_title(params.title)
    except BookNotFoundError as e:
        logger.info("%s failed - book not found: %s", action.value.capitalize(), e)
        return CirculationResult(
            action=action,
            title=params.title,
            year=params.year,
            success=False,
            message=str(e),
        )

    transition: Callable[[int], None] = (
        book.checkout_at if action is CirculationAction.CHECKOUT else book.return_at
    )

    try:
        transition(params.year)
    except CirculationError as e:
        logger.warning("%s rejected (%s): %s", action.value.capitalize(), e.kind.value, e)
        return CirculationResult(
            action=action,
            title=params.title,
            year=params.year,
            success=False,
            error_kind=e.kind,
            message=e.message,
        )

    logger.info("%s of '%s' in %d succeeded", action.value.capitalize(), params.title, params.year)
    return CirculationResult(
        action=action,
        title=params.title,
        year=params.year,
        success=True,
        message=_success_message(action, params.title, params.year),
    )


def _success_message(action: CirculationAction, title: str, year: int) -> str:
    if action is CirculationAction.CHECKOUT:
        return f"Successfully checked out '{title}' in {year}!"
    return f"Successfully returned '{title}' in {year}!"


def available_titles(catalog: Catalog, year: int) -> list[str]:
    """Titles of the books available in ``year``, in catalog order."""
    books: list[Borrowable] = catalog.available_in_year(year)
    return [book.title for book in books]
