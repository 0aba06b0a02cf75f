from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from cheese_wizard.schemas.cheese import CheeseResponse, NewCheeseBody
from cheese_wizard.services.cheese_service import CheeseWizardService

router = APIRouter(tags=["Cheeses"])


def get_service(request: Request) -> CheeseWizardService:
    """FastAPI dependency returning the application's service instance."""
    return request.app.state.service


@router.post(
    "/cheeses",
    response_model=CheeseResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_cheese(
    body: NewCheeseBody,
    service: CheeseWizardService = Depends(get_service),
) -> CheeseResponse:
    """Register a new, unrated cheese.

    Raises:
        DuplicateNameError: 409 if the name is already registered.
    """
    cheese = service.create_cheese(body.to_request())
    return CheeseResponse.from_domain(cheese)


@router.get("/cheeses", response_model=list[CheeseResponse])
def list_cheeses(
    service: CheeseWizardService = Depends(get_service),
) -> list[CheeseResponse]:
    """List every registered cheese sorted by name."""
    return [CheeseResponse.from_domain(cheese) for cheese in service.list_cheeses()]


@router.get("/cheeses/{name:path}", response_model=CheeseResponse)
def get_cheese(
    name: str,
    service: CheeseWizardService = Depends(get_service),
) -> CheeseResponse:
    """Fetch one cheese by name; names may contain slashes."""
    return CheeseResponse.from_domain(service.get_cheese(name))
