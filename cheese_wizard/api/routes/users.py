from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status

from cheese_wizard.api.routes.cheeses import get_service
from cheese_wizard.schemas.user import CheeseRatingBody, NewUserBody, UserResponse
from cheese_wizard.services.cheese_service import CheeseWizardService

router = APIRouter(tags=["Users"])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    body: NewUserBody,
    service: CheeseWizardService = Depends(get_service),
) -> UserResponse:
    """Create a user with a freshly generated id and no ratings."""
    user = service.create_user(name=body.name, age=body.age)
    return UserResponse.from_domain(user)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(
    user_id: uuid.UUID,
    service: CheeseWizardService = Depends(get_service),
) -> UserResponse:
    return UserResponse.from_domain(service.get_user(user_id))


@router.post(
    "/users/{user_id}/ratings",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def rate_cheese(
    user_id: uuid.UUID,
    body: CheeseRatingBody,
    service: CheeseWizardService = Depends(get_service),
) -> UserResponse:
    """Rate a registered cheese as the given user.

    Returns the user with the new rating included.

    Raises:
        RatingBoundsError: 400 if the rating is outside 1..10.
        NameNotFoundError: 404 if the cheese is not registered.
        UserNotFoundError: 404 if the user id is unknown.
        DuplicateRatingError: 409 if the user already rated this cheese.
    """
    user = service.rate(user_id, body.to_request())
    return UserResponse.from_domain(user)
