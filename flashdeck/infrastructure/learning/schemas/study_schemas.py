"""Pydantic schemas for the study endpoint."""

from pydantic import BaseModel, Field

from flashdeck.application.learning.use_cases.dtos import StudyDeck
from flashdeck.infrastructure.learning.schemas.card_schemas import Card
from flashdeck.infrastructure.learning.schemas.deck_schemas import Deck


class StudyDeckResponse(BaseModel):
    """Cards of a deck in the order a study session presents them."""

    deck: Deck
    cards: list[Card]
    shuffled: bool
    shuffle_seed: int | None = Field(
        None, description="Seed that produced the order; replaying it gives the same order"
    )

    @classmethod
    def from_dto(cls, study_deck: StudyDeck) -> "StudyDeckResponse":
        return cls(
            deck=Deck.from_entity(study_deck.deck),
            cards=[Card.from_entity(card) for card in study_deck.cards],
            shuffled=study_deck.is_shuffled,
            shuffle_seed=study_deck.shuffle_seed,
        )
