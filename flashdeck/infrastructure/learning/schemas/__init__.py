from .card_schemas import (
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
from .deck_schemas import (
    Dashboard,
    Deck,
    DeckActionResponse,
    DeckCreateRequest,
    DeckDeleteActionResponse,
    DeckDeleted,
    DeckSummary,
    DeckUpdateRequest,
    DeckWithCards,
)
from .study_schemas import StudyDeckResponse

__all__ = [
    "Card",
    "CardActionResponse",
    "CardCreateRequest",
    "CardDeleteActionResponse",
    "CardDeleted",
    "CardUpdateRequest",
    "CardsListResponse",
    "Dashboard",
    "Deck",
    "DeckActionResponse",
    "DeckCreateRequest",
    "DeckDeleteActionResponse",
    "DeckDeleted",
    "DeckSummary",
    "DeckUpdateRequest",
    "DeckWithCards",
    "GenerateCardsActionResponse",
    "GenerateCardsRequest",
    "GeneratedCards",
    "StudyDeckResponse",
]
