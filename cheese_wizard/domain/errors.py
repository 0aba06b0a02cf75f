"""Domain errors raised by the rating value, registries and rating maps.

Each error carries a stable code plus the category class (validation,
not found, conflict) the exception handlers map to a status code.
"""

from __future__ import annotations

from typing import Any

from cheese_wizard.core.errors import (
    AppError,
    ConflictAppError,
    NotFoundAppError,
    ValidationAppError,
)


class RatingBoundsError(ValidationAppError):
    """Raised when a raw rating is not a whole number in the accepted range."""

    BELOW_MINIMUM = "below_minimum_rating"
    EXCEEDS_MAXIMUM = "exceeds_maximum_rating"
    NOT_AN_INTEGER = "rating_not_an_integer"

    @classmethod
    def not_an_integer(cls, raw: Any) -> RatingBoundsError:
        return cls(
            code=cls.NOT_AN_INTEGER,
            message="The given rating must be a whole number",
            details={"actual_value": repr(raw)},
        )

    @classmethod
    def below_minimum(cls, raw: int, minimum: int) -> RatingBoundsError:
        return cls(
            code=cls.BELOW_MINIMUM,
            message=f"The given rating is below the minimum rating of {minimum}",
            details={"min_value": minimum, "actual_value": raw},
        )

    @classmethod
    def exceeds_maximum(cls, raw: int, maximum: int) -> RatingBoundsError:
        return cls(
            code=cls.EXCEEDS_MAXIMUM,
            message=f"The given rating exceeds the maximum rating of {maximum}",
            details={"max_value": maximum, "actual_value": raw},
        )


class RegistryError(AppError):
    """Base class for named entity registry failures."""


class DuplicateNameError(RegistryError, ConflictAppError):
    """Raised when inserting an entity whose name is already registered."""

    @classmethod
    def for_name(cls, name: str, label: str = "cheese") -> DuplicateNameError:
        return cls(
            code=f"duplicate_{label}_name",
            message=(
                f"Cannot insert {label}, {label} names must be unique across a registry."
            ),
            details={"context": {"name": name}},
        )


class NameNotFoundError(RegistryError, NotFoundAppError):
    """Raised when a registry lookup finds no entity under the name."""

    @classmethod
    def for_name(cls, name: str, label: str = "cheese") -> NameNotFoundError:
        return cls(
            code=f"{label}_not_found",
            message=f"No such {label} in the registry",
            details={"context": {"name": name}},
        )


class RatingMapError(AppError):
    """Base class for rating map failures."""


class DuplicateRatingError(RatingMapError, ConflictAppError):
    """Raised when a key already holds a rating."""

    @classmethod
    def for_key(cls, key: Any) -> DuplicateRatingError:
        return cls(
            code="duplicate_rating",
            message="A rating has already been recorded for this key.",
            details={"key": str(key)},
        )


class RatingNotFoundError(RatingMapError, NotFoundAppError):
    """Raised when no rating is stored under a key."""

    @classmethod
    def for_key(cls, key: Any) -> RatingNotFoundError:
        return cls(
            code="rating_not_found",
            message="No rating has been recorded for this key.",
            details={"key": str(key)},
        )


class UserNotFoundError(NotFoundAppError):
    """Raised when a user id is unknown to the service."""

    @classmethod
    def for_id(cls, user_id: Any) -> UserNotFoundError:
        return cls(
            code="user_not_found",
            message="No such user.",
            details={"user_id": str(user_id)},
        )
