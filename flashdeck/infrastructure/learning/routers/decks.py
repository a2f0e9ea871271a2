"""API routes for deck management."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from flashdeck.application.learning.use_cases.decks.create_deck_use_case import (
    CreateDeckUseCase,
)
from flashdeck.application.learning.use_cases.decks.delete_deck_use_case import (
    DeleteDeckUseCase,
)
from flashdeck.application.learning.use_cases.decks.get_dashboard_use_case import (
    GetDashboardUseCase,
)
from flashdeck.application.learning.use_cases.decks.get_deck_use_case import GetDeckUseCase
from flashdeck.application.learning.use_cases.decks.update_deck_use_case import (
    UpdateDeckUseCase,
)
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.core import container
from flashdeck.infrastructure.common.action_responses import (
    ACTION_ERROR_RESPONSES,
    action_response,
)
from flashdeck.infrastructure.common.di import get_view_registry, inject_use_case
from flashdeck.infrastructure.common.view_registry import ViewRegistry
from flashdeck.infrastructure.identity.dependencies import CurrentCaller
from flashdeck.infrastructure.learning.schemas import (
    Dashboard,
    Deck,
    DeckActionResponse,
    DeckCreateRequest,
    DeckDeleteActionResponse,
    DeckDeleted,
    DeckUpdateRequest,
    DeckWithCards,
)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=Dashboard, status_code=status.HTTP_200_OK)
def get_dashboard(
    response: Response,
    caller: CurrentCaller,
    view_registry: Annotated[ViewRegistry, Depends(get_view_registry)],
    use_case: GetDashboardUseCase = Depends(inject_use_case(container.get_dashboard_use_case)),
) -> Dashboard:
    """
    Get the caller's decks with card counts and plan limits.

    The ETag header changes whenever any deck or card mutation touches the
    dashboard.
    """
    dashboard = use_case.get_dashboard(caller)
    response.headers["ETag"] = view_registry.etag(DASHBOARD_VIEW)
    return Dashboard.from_dto(dashboard)


@router.post(
    "",
    response_model=DeckActionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ACTION_ERROR_RESPONSES,
)
def create_deck(
    request: DeckCreateRequest,
    caller: CurrentCaller,
    use_case: CreateDeckUseCase = Depends(inject_use_case(container.create_deck_use_case)),
) -> JSONResponse:
    """
    Create a deck.

    Fails with 403 and ``upgrade_required`` once a caller without unlimited
    decks reaches the free plan limit.
    """
    result = use_case.create_deck(caller, name=request.name, description=request.description)
    return action_response(result, Deck.from_entity, status_code=status.HTTP_201_CREATED)


@router.get("/{deck_id}", response_model=DeckWithCards, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: int,
    response: Response,
    caller: CurrentCaller,
    view_registry: Annotated[ViewRegistry, Depends(get_view_registry)],
    use_case: GetDeckUseCase = Depends(inject_use_case(container.get_deck_use_case)),
) -> DeckWithCards:
    """Get one of the caller's decks with its cards."""
    deck = use_case.get_deck(caller, deck_id)
    response.headers["ETag"] = view_registry.etag(deck_view(deck_id))
    return DeckWithCards.from_dto(deck)


@router.put(
    "/{deck_id}",
    response_model=DeckActionResponse,
    status_code=status.HTTP_200_OK,
    responses=ACTION_ERROR_RESPONSES,
)
def update_deck(
    deck_id: int,
    request: DeckUpdateRequest,
    caller: CurrentCaller,
    use_case: UpdateDeckUseCase = Depends(inject_use_case(container.update_deck_use_case)),
) -> JSONResponse:
    """Update a deck's name and description."""
    result = use_case.update_deck(
        caller, deck_id, name=request.name, description=request.description
    )
    return action_response(result, Deck.from_entity)


@router.delete(
    "/{deck_id}",
    response_model=DeckDeleteActionResponse,
    status_code=status.HTTP_200_OK,
    responses=ACTION_ERROR_RESPONSES,
)
def delete_deck(
    deck_id: int,
    caller: CurrentCaller,
    use_case: DeleteDeckUseCase = Depends(inject_use_case(container.delete_deck_use_case)),
) -> JSONResponse:
    """Delete a deck together with all of its cards."""
    result = use_case.delete_deck(caller, deck_id)
    return action_response(result, lambda deleted_id: DeckDeleted(id=deleted_id.value))
