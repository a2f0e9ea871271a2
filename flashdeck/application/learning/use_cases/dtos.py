"""DTOs for learning use cases."""

from dataclasses import dataclass

from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.entities.deck import Deck


@dataclass
class DeckWithCardCount:
    deck: Deck
    card_count: int


@dataclass
class Dashboard:
    """Decks of a caller and what their plan lets them do next."""

    decks: list[DeckWithCardCount]
    deck_limit: int | None
    can_create_deck: bool
    can_generate_cards: bool

    @property
    def deck_count(self) -> int:
        return len(self.decks)


@dataclass
class DeckWithCards:
    deck: Deck
    cards: list[Card]


@dataclass
class GeneratedCardsResult:
    deck_id: DeckId
    count: int


@dataclass
class StudyDeck:
    """Cards of a deck in the order a study session presents them."""

    deck: Deck
    cards: list[Card]
    shuffle_seed: int | None = None

    @property
    def is_shuffled(self) -> bool:
        return self.shuffle_seed is not None
