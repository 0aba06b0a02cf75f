from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from cheese_wizard.domain.rating import CheeseRating
from cheese_wizard.domain.rating_map import RatingMap


@dataclass
class Cheese:
    """A registered cheese and the ratings it received, keyed by user id."""

    name: str
    ratings: RatingMap[uuid.UUID] = field(default_factory=RatingMap)

    def insert_rating(self, user_id: uuid.UUID, rating: CheeseRating) -> None:
        self.ratings.insert(user_id, rating)


@dataclass
class User:
    """A rater and the ratings they gave, keyed by cheese name.

    The id is generated at creation and never changes.
    """

    name: str = ""
    age: int = 0
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    ratings: RatingMap[str] = field(default_factory=RatingMap)

    def insert_rating(self, cheese_name: str, rating: CheeseRating) -> None:
        self.ratings.insert(cheese_name, rating)
