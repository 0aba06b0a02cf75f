from __future__ import annotations

from cheese_wizard.domain.models import Cheese, User
from cheese_wizard.domain.rating import MAX_RATING, MIN_RATING, CheeseRating
from cheese_wizard.domain.rating_map import RatingMap
from cheese_wizard.domain.registry import CheeseRegistry, NamedEntityRegistry
from cheese_wizard.domain.requests import CheeseRatingRequest, NewCheeseRequest

__all__ = [
    "Cheese",
    "CheeseRating",
    "CheeseRatingRequest",
    "CheeseRegistry",
    "MAX_RATING",
    "MIN_RATING",
    "NamedEntityRegistry",
    "NewCheeseRequest",
    "RatingMap",
    "User",
]
