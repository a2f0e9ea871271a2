"""Pydantic schemas for Card API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from flashdeck.domain.learning.entities.card import Card as CardEntity


class Card(BaseModel):
    """Schema for Card response."""

    id: int
    deck_id: int
    front: str
    back: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, card: CardEntity) -> "Card":
        return cls(
            id=card.id.value,
            deck_id=card.deck_id.value,
            front=card.front,
            back=card.back,
            created_at=card.created_at,
            updated_at=card.updated_at,
        )


# Request bodies are only checked for shape here; length and emptiness rules
# are enforced by the use case so failures come back in the action envelope.
class CardCreateRequest(BaseModel):
    """Schema for creating a new card."""

    front: str = Field(..., description="Front side (1-1000 characters)")
    back: str = Field(..., description="Back side (1-1000 characters)")


class CardUpdateRequest(BaseModel):
    """Schema for updating a card."""

    front: str = Field(..., description="New front side (1-1000 characters)")
    back: str = Field(..., description="New back side (1-1000 characters)")


class CardActionResponse(BaseModel):
    success: Literal[True] = True
    data: Card


class CardDeleted(BaseModel):
    id: int


class CardDeleteActionResponse(BaseModel):
    success: Literal[True] = True
    data: CardDeleted


class CardsListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[Card] = Field(..., description="Cards of the deck in creation order")


class GenerateCardsRequest(BaseModel):
    """Optional overrides for the deck name and description used in the prompt."""

    deck_name: str | None = Field(None, description="Topic name, defaults to the deck name")
    deck_description: str | None = Field(
        None, description="Topic description, defaults to the deck description"
    )


class GeneratedCards(BaseModel):
    deck_id: int
    count: int = Field(..., description="Number of cards saved")


class GenerateCardsActionResponse(BaseModel):
    success: Literal[True] = True
    data: GeneratedCards
