"""Pydantic schemas for cheese requests and responses."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from cheese_wizard.domain.models import Cheese
from cheese_wizard.domain.requests import NewCheeseRequest


class NewCheeseBody(BaseModel):
    """Body of ``POST /cheeses``."""

    name: str = Field(
        ...,
        min_length=1,
        description="Cheese name; must be unique across the registry.",
    )

    def to_request(self) -> NewCheeseRequest:
        return NewCheeseRequest(name=self.name)


class CheeseRatingEntry(BaseModel):
    """A single rating a cheese received."""

    user_id: uuid.UUID = Field(..., description="Id of the user who gave the rating.")
    rating: int = Field(..., description="Rating value between 1 and 10.")


class CheeseResponse(BaseModel):
    """A registered cheese with every rating it received."""

    name: str = Field(..., description="Unique cheese name.")
    ratings: list[CheeseRatingEntry] = Field(
        default_factory=list,
        description="Ratings received, sorted by user id.",
    )

    @classmethod
    def from_domain(cls, cheese: Cheese) -> CheeseResponse:
        entries = sorted(cheese.ratings.items(), key=lambda pair: str(pair[0]))
        return cls(
            name=cheese.name,
            ratings=[
                CheeseRatingEntry(user_id=user_id, rating=int(rating))
                for user_id, rating in entries
            ],
        )
