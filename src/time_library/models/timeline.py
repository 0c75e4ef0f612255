"""
Existence interval model for the Time Library.

A Timeline is the inclusive span of years during which something exists.
An open-ended Timeline (no end year) describes an item that still exists.
Years are whole, non-negative integers; there is no finer granularity.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator


class Timeline(BaseModel):
    """
    Inclusive range of years ``[start_year, end_year]``.

    Construction is permissive: an end year before the start year is kept
    as given, which makes ``exists_at`` false for every year. Pass
    ``context={"strict_timelines": True}`` to ``model_validate`` to reject
    such intervals instead.
    """

    start_year: int = Field(
        ...,
        description="First year the item exists (inclusive)",
        ge=0,
        examples=[1613, 1895],
    )

    end_year: int | None = Field(
        None,
        description="Last year the item exists (inclusive); None means it still exists",
        ge=0,
        examples=[1613, None],
    )

    @model_validator(mode="after")
    def validate_order(self, info: ValidationInfo) -> "Timeline":
        """Reject reversed intervals when strict validation is requested."""
        strict = bool(info.context and info.context.get("strict_timelines"))
        if strict and not self.is_well_formed:
            raise ValueError(
                f"End year {self.end_year} cannot precede start year {self.start_year}"
            )
        return self

    @property
    def is_open_ended(self) -> bool:
        """True when the item has no known end year."""
        return self.end_year is None

    @property
    def is_well_formed(self) -> bool:
        """True unless the end year precedes the start year."""
        return self.end_year is None or self.end_year >= self.start_year

    def exists_at(self, year: int) -> bool:
        """Check whether ``year`` falls inside the interval."""
        if year < self.start_year:
            return False
        return self.end_year is None or year <= self.end_year

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "start_year": 1895,
                "end_year": None,
            }
        },
    )
