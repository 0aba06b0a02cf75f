"""Pydantic schemas for user requests and responses."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from cheese_wizard.domain.models import User
from cheese_wizard.domain.requests import CheeseRatingRequest


class NewUserBody(BaseModel):
    name: str = Field(default="", description="Display name.")
    age: int = Field(default=0, ge=0, description="Age in years.")


class CheeseRatingBody(BaseModel):
    """Body of ``POST /users/{user_id}/ratings``.

    The rating is only checked for being an integer here; its bounds are
    enforced by the domain so the error carries the bounds code.
    """

    rating: int = Field(..., description="Rating value between 1 and 10.")
    cheese: str = Field(..., description="Name of a registered cheese.")

    def to_request(self) -> CheeseRatingRequest:
        return CheeseRatingRequest(rating=self.rating, cheese=self.cheese)


class UserRatingEntry(BaseModel):
    cheese: str
    rating: int


class UserResponse(BaseModel):
    """A user with every rating they gave."""

    id: uuid.UUID
    name: str
    age: int
    ratings: list[UserRatingEntry] = Field(
        default_factory=list,
        description="Ratings given, sorted by cheese name.",
    )

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        return cls(
            id=user.id,
            name=user.name,
            age=user.age,
            ratings=[
                UserRatingEntry(cheese=cheese, rating=int(rating))
                for cheese, rating in sorted(user.ratings.items())
            ],
        )
