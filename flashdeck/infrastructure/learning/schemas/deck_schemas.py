"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from flashdeck.application.learning.use_cases import dtos
from flashdeck.domain.learning.entities.deck import Deck as DeckEntity
from flashdeck.infrastructure.learning.schemas.card_schemas import Card


class Deck(BaseModel):
    """Schema for Deck response."""

    id: int
    name: str
    description: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, deck: DeckEntity) -> "Deck":
        return cls(
            id=deck.id.value,
            name=deck.name,
            description=deck.description,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )


class DeckSummary(Deck):
    """Deck as listed on the dashboard."""

    card_count: int


class Dashboard(BaseModel):
    """Schema for the caller's deck dashboard."""

    decks: list[DeckSummary]
    deck_count: int
    deck_limit: int | None = Field(..., description="Maximum number of decks, null if unlimited")
    can_create_deck: bool
    can_generate_cards: bool = Field(
        ..., description="Whether the caller's plan includes AI card generation"
    )

    @classmethod
    def from_dto(cls, dashboard: dtos.Dashboard) -> "Dashboard":
        return cls(
            decks=[
                DeckSummary(
                    **Deck.from_entity(item.deck).model_dump(), card_count=item.card_count
                )
                for item in dashboard.decks
            ],
            deck_count=dashboard.deck_count,
            deck_limit=dashboard.deck_limit,
            can_create_deck=dashboard.can_create_deck,
            can_generate_cards=dashboard.can_generate_cards,
        )


class DeckWithCards(Deck):
    """Schema for a deck with all of its cards."""

    cards: list[Card]

    @classmethod
    def from_dto(cls, deck_with_cards: dtos.DeckWithCards) -> "DeckWithCards":
        return cls(
            **Deck.from_entity(deck_with_cards.deck).model_dump(),
            cards=[Card.from_entity(card) for card in deck_with_cards.cards],
        )


class DeckCreateRequest(BaseModel):
    """Schema for creating a new deck."""

    name: str = Field(..., description="Deck name (1-255 characters)")
    description: str | None = Field(None, description="Optional description (up to 1000)")


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck."""

    name: str = Field(..., description="New deck name (1-255 characters)")
    description: str | None = Field(None, description="New description, null to clear it")


class DeckActionResponse(BaseModel):
    success: Literal[True] = True
    data: Deck


class DeckDeleted(BaseModel):
    id: int


class DeckDeleteActionResponse(BaseModel):
    success: Literal[True] = True
    data: DeckDeleted
