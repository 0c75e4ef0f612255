"""
Book model for the Time Library.

A Book exists over a Timeline and keeps a sparse checkout history keyed by
year. The history holds the result of the last action taken in each year:
True after a checkout, False after a return. Years with no entry have never
been touched and count as available.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..config import get_config
from ..exceptions import AlreadyCheckedOutError, NotCheckedOutError, NotExistentError
from .capabilities import Borrowable
from .timeline import Timeline


class Book(BaseModel, Borrowable):
    """
    A borrowable book that exists across a span of years.

    Checkout state is tracked per year and years never affect each other:
    checking a book out in 1899 says nothing about 1900.
    """

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        examples=["The Time Machine", "Cardenio"],
    )

    author: str = Field(
        ...,
        description="Name of the book's author",
        examples=["H. G. Wells", "William Shakespeare"],
    )

    timeline: Timeline = Field(
        ...,
        description="Years during which the book exists",
    )

    checkout_history: dict[int, bool] = Field(
        default_factory=dict,
        description="Per-year checkout flag; absent years are available",
    )

    @classmethod
    def create(
        cls,
        title: str,
        author: str,
        start_year: int,
        end_year: int | None = None,
        *,
        strict: bool | None = None,
    ) -> "Book":
        """
        Build a book with a fresh checkout history.

        Args:
            title: Book title
            author: Author name
            start_year: First year the book exists
            end_year: Last year the book exists, or None if it still exists
            strict: Reject ``end_year < start_year``. Defaults to the
                ``strict_timelines`` setting.

        Raises:
            pydantic.ValidationError: If the years are negative, or reversed
                under strict validation
        """
        if strict is None:
            strict = get_config().strict_timelines
        timeline = Timeline.model_validate(
            {"start_year": start_year, "end_year": end_year},
            context={"strict_timelines": strict},
        )
        return cls(title=title, author=author, timeline=timeline)

    def get_timeline(self) -> Timeline:
        return self.timeline

    def is_available_at(self, year: int) -> bool:
        if not self.exists_at(year):
            return False
        return not self.checkout_history.get(year, False)

    def checkout_at(self, year: int) -> None:
        """
        Check the book out for ``year``.

        Raises:
            NotExistentError: If the book does not exist in ``year``
            AlreadyCheckedOutError: If the book is already out in ``year``
        """
        if not self.exists_at(year):
            raise NotExistentError(self.title, year)
        if not self.is_available_at(year):
            raise AlreadyCheckedOutError(self.title, year)
        self.checkout_history[year] = True

    def return_at(self, year: int) -> None:
        """
        Return the book for ``year``.

        Raises:
            NotExistentError: If the book does not exist in ``year``
            NotCheckedOutError: If the book was not checked out in ``year``
        """
        if not self.exists_at(year):
            raise NotExistentError(self.title, year)
        if self.is_available_at(year):
            raise NotCheckedOutError(self.title, year)
        self.checkout_history[year] = False

    def checked_out_years(self) -> list[int]:
        """Years in which the book is currently checked out, ascending."""
        return sorted(year for year, out in self.checkout_history.items() if out)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "The Time Machine",
                "author": "H. G. Wells",
                "timeline": {"start_year": 1895, "end_year": None},
                "checkout_history": {"1899": True},
            }
        }
    )
