"""API routes for card management."""


from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from flashdeck.application.learning.use_cases.cards.create_card_use_case import (
    CreateCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.delete_card_use_case import (
    DeleteCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.generate_cards_use_case import (
    GenerateCardsUseCase,
)
from flashdeck.application.learning.use_cases.cards.update_card_use_case import (
    UpdateCardUseCase,
)
from flashdeck.application.learning.use_cases.decks.get_deck_use_case import GetDeckUseCase
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.dependencies import AI_DISABLED_DETAIL, require_ai_enabled
from flashdeck.infrastructure.common.action_responses import (
    ACTION_ERROR_RESPONSES,
    action_response,
)
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.schemas.action_response import ActionErrorResponse
from flashdeck.infrastructure.identity.dependencies import CurrentCaller
from flashdeck.infrastructure.learning.schemas import (
    Card,
    CardActionResponse,
    CardCreateRequest,
    CardDeleteActionResponse,
    CardDeleted,
    CardsListResponse,
    CardUpdateRequest,
    GenerateCardsActionResponse,
    GenerateCardsRequest,
    GeneratedCards,
)

settings = get_settings()

deck_cards_router = APIRouter(prefix="/decks/{deck_id}/cards", tags=["cards"])
router = APIRouter(prefix="/cards", tags=["cards"])


@deck_cards_router.get("", response_model=CardsListResponse, status_code=status.HTTP_200_OK)
def get_cards(
    deck_id: int,
    caller: CurrentCaller,
    use_case: GetDeckUseCase = Depends(inject_use_case(container.get_deck_use_case)),
) -> CardsListResponse:
    """Get the cards of one of the caller's decks in creation order."""
    cards = use_case.get_cards(caller, deck_id)
    return CardsListResponse(cards=[Card.from_entity(card) for card in cards])


@deck_cards_router.post(
    "",
    response_model=CardActionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ACTION_ERROR_RESPONSES,
)
def create_card(
    deck_id: int,
    request: CardCreateRequest,
    caller: CurrentCaller,
    use_case: CreateCardUseCase = Depends(inject_use_case(container.create_card_use_case)),
) -> JSONResponse:
    """Add a card to one of the caller's decks."""
    result = use_case.create_card(caller, deck_id, front=request.front, back=request.back)
    return action_response(result, Card.from_entity, status_code=status.HTTP_201_CREATED)


@deck_cards_router.post(
    "/generate",
    response_model=GenerateCardsActionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **ACTION_ERROR_RESPONSES,
        status.HTTP_410_GONE: {"description": AI_DISABLED_DETAIL},
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": ActionErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ActionErrorResponse},
    },
)
@limiter.limit(settings.AI_GENERATION_RATE_LIMIT)  # type: ignore[misc]
@require_ai_enabled
async def generate_cards(
    request: Request,
    deck_id: int,
    caller: CurrentCaller,
    body: GenerateCardsRequest | None = None,
    use_case: GenerateCardsUseCase = Depends(inject_use_case(container.generate_cards_use_case)),
) -> JSONResponse:
    """
    Generate 15-25 cards for a deck with AI.

    Requires the ``ai_flashcard_generation`` plan feature and a deck
    description of at least 10 characters. Fails with 410 when the server
    has no AI provider configured.
    """
    body = body or GenerateCardsRequest()
    result = await use_case.generate_cards(
        caller,
        deck_id,
        deck_name=body.deck_name,
        deck_description=body.deck_description,
    )
    return action_response(
        result,
        lambda generated: GeneratedCards(deck_id=generated.deck_id.value, count=generated.count),
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{card_id}",
    response_model=CardActionResponse,
    status_code=status.HTTP_200_OK,
    responses=ACTION_ERROR_RESPONSES,
)
def update_card(
    card_id: int,
    request: CardUpdateRequest,
    caller: CurrentCaller,
    use_case: UpdateCardUseCase = Depends(inject_use_case(container.update_card_use_case)),
) -> JSONResponse:
    """Replace both sides of a card."""
    result = use_case.update_card(caller, card_id, front=request.front, back=request.back)
    return action_response(result, Card.from_entity)


@router.delete(
    "/{card_id}",
    response_model=CardDeleteActionResponse,
    status_code=status.HTTP_200_OK,
    responses=ACTION_ERROR_RESPONSES,
)
def delete_card(
    card_id: int,
    caller: CurrentCaller,
    use_case: DeleteCardUseCase = Depends(inject_use_case(container.delete_card_use_case)),
) -> JSONResponse:
    """Delete a card."""
    result = use_case.delete_card(caller, card_id)
    return action_response(result, lambda deleted_id: CardDeleted(id=deleted_id.value))
