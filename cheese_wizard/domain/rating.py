"""Bounded cheese rating value."""

from __future__ import annotations

from dataclasses import dataclass

from cheese_wizard.domain.errors import RatingBoundsError

MIN_RATING = 1
MAX_RATING = 10


@dataclass(frozen=True, order=True)
class CheeseRating:
    """A whole-number rating between MIN_RATING and MAX_RATING inclusive.

    Every instance is checked on construction, whether built directly or
    through ``create``.

    Raises:
        RatingBoundsError: ``rating_not_an_integer`` for non-integer input
            (bools included), ``below_minimum_rating`` or
            ``exceeds_maximum_rating`` when out of range.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise RatingBoundsError.not_an_integer(self.value)
        if self.value < MIN_RATING:
            raise RatingBoundsError.below_minimum(self.value, MIN_RATING)
        if self.value > MAX_RATING:
            raise RatingBoundsError.exceeds_maximum(self.value, MAX_RATING)

    @classmethod
    def create(cls, raw: int) -> CheeseRating:
        """Validate a raw integer as received from a caller and wrap it."""
        return cls(raw)

    def __int__(self) -> int:
        return self.value
