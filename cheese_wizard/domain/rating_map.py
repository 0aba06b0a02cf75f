"""Keyed store of cheese ratings with at-most-one rating per key.

The same structure backs both sides of a rating: a cheese keeps the ratings
it received keyed by user id, a user keeps the ratings they gave keyed by
cheese name.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

from cheese_wizard.domain.errors import DuplicateRatingError, RatingNotFoundError
from cheese_wizard.domain.rating import CheeseRating

K = TypeVar("K", bound=Hashable)


class RatingMap(Generic[K]):
    """Mapping of key to CheeseRating that never overwrites.

    Attributes are private; use ``insert``/``get`` and iteration.
    """

    def __init__(self) -> None:
        self._ratings: dict[K, CheeseRating] = {}

    def __repr__(self) -> str:  # pragma: no cover - representation only
        return f"RatingMap(size={len(self._ratings)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RatingMap):
            return NotImplemented
        return self._ratings == other._ratings

    def __len__(self) -> int:
        return len(self._ratings)

    def __contains__(self, key: object) -> bool:
        return key in self._ratings

    def __iter__(self) -> Iterator[tuple[K, CheeseRating]]:
        return self.items()

    def insert(self, key: K, rating: CheeseRating) -> None:
        """Record ``rating`` under ``key``.

        Raises:
            DuplicateRatingError: If ``key`` already holds a rating.
        """
        if key in self._ratings:
            raise DuplicateRatingError.for_key(key)
        self._ratings[key] = rating

    def get(self, key: K) -> CheeseRating:
        """Return the rating stored under ``key``.

        Raises:
            RatingNotFoundError: If ``key`` holds no rating.
        """
        try:
            return self._ratings[key]
        except KeyError:
            raise RatingNotFoundError.for_key(key) from None

    def items(self) -> Iterator[tuple[K, CheeseRating]]:
        """Iterate ``(key, rating)`` pairs over a snapshot of the map."""
        return iter(list(self._ratings.items()))
