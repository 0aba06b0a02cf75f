"""Unit tests for the bounded CheeseRating value."""

import dataclasses

import pytest

from cheese_wizard.core.errors import ValidationAppError
from cheese_wizard.domain.errors import RatingBoundsError
from cheese_wizard.domain.rating import MAX_RATING, MIN_RATING, CheeseRating
from cheese_wizard.domain.rating_map import RatingMap


@pytest.mark.parametrize("raw", range(MIN_RATING, MAX_RATING + 1))
def test_ratings_within_bounds_are_accepted(raw: int) -> None:
    rating = CheeseRating.create(raw)

    assert rating == CheeseRating(raw)
    assert int(rating) == raw


@pytest.mark.parametrize("raw", [0, -1, -100])
def test_rating_below_minimum_is_rejected(raw: int) -> None:
    with pytest.raises(RatingBoundsError) as exc_info:
        CheeseRating.create(raw)

    assert exc_info.value.code == RatingBoundsError.BELOW_MINIMUM
    assert exc_info.value.details == {"min_value": 1, "actual_value": raw}


@pytest.mark.parametrize("raw", [11, 12, 255])
def test_rating_above_maximum_is_rejected(raw: int) -> None:
    with pytest.raises(RatingBoundsError) as exc_info:
        CheeseRating.create(raw)

    assert exc_info.value.code == RatingBoundsError.EXCEEDS_MAXIMUM
    assert "maximum rating of 10" in exc_info.value.message


def test_bounds_error_is_a_validation_error() -> None:
    with pytest.raises(ValidationAppError):
        CheeseRating.create(0)


def test_ratings_order_by_value() -> None:
    assert CheeseRating.create(3) < CheeseRating.create(7)
    assert max(CheeseRating.create(2), CheeseRating.create(9)) == CheeseRating.create(9)


def test_rating_is_immutable() -> None:
    rating = CheeseRating.create(5)

    with pytest.raises(dataclasses.FrozenInstanceError):
        rating.value = 6  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw,code",
    [
        (0, RatingBoundsError.BELOW_MINIMUM),
        (11, RatingBoundsError.EXCEEDS_MAXIMUM),
        (42, RatingBoundsError.EXCEEDS_MAXIMUM),
    ],
)
def test_direct_construction_enforces_bounds(raw: int, code: str) -> None:
    with pytest.raises(RatingBoundsError) as exc_info:
        CheeseRating(raw)

    assert exc_info.value.code == code


@pytest.mark.parametrize("raw", [5.5, True, False, "5", None])
def test_non_integer_rating_is_rejected(raw) -> None:
    with pytest.raises(RatingBoundsError) as exc_info:
        CheeseRating.create(raw)

    assert exc_info.value.code == RatingBoundsError.NOT_AN_INTEGER
    assert exc_info.value.details == {"actual_value": repr(raw)}


def test_out_of_range_rating_cannot_reach_a_rating_map() -> None:
    ratings: RatingMap[str] = RatingMap()

    with pytest.raises(RatingBoundsError):
        ratings.insert("Brie", CheeseRating(0))

    assert len(ratings) == 0
