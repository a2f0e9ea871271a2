"""In-memory collaborators for use case tests."""

from dataclasses import replace

import pytest

from flashdeck.application.learning.protocols.ai_card_generation_service import GeneratedCard
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.domain.common.value_objects.ids import CardId, DeckId, UserId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.infrastructure.identity.services.entitlement_service import EntitlementService


class InMemoryDeckRepository:
    def __init__(self) -> None:
        self.decks: dict[int, Deck] = {}
        self.calls: list[str] = []
        self.cards: "InMemoryCardRepository | None" = None
        self._next_id = 1

    def find_by_id_for_owner(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        self.calls.append("find_by_id_for_owner")
        deck = self.decks.get(deck_id.value)
        if deck is None or deck.user_id != user_id:
            return None
        return replace(deck)

    def find_by_owner_with_card_counts(self, user_id: UserId) -> list[tuple[Deck, int]]:
        self.calls.append("find_by_owner_with_card_counts")
        return [
            (deck, self.cards.count_by_deck(deck.id) if self.cards else 0)
            for deck in self.decks.values()
            if deck.user_id == user_id
        ]

    def count_by_owner(self, user_id: UserId) -> int:
        self.calls.append("count_by_owner")
        return sum(1 for deck in self.decks.values() if deck.user_id == user_id)

    def save(self, deck: Deck) -> Deck:
        self.calls.append("save")
        if not deck.id.is_persisted:
            deck = replace(deck, id=DeckId(self._next_id))
            self._next_id += 1
        self.decks[deck.id.value] = deck
        return deck

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        self.calls.append("delete")
        deck = self.decks.get(deck_id.value)
        if deck is None or deck.user_id != user_id:
            return False
        del self.decks[deck_id.value]
        if self.cards:
            for card in self.cards.find_by_deck(deck_id):
                del self.cards.cards[card.id.value]
        return True


class InMemoryCardRepository:
    def __init__(self) -> None:
        self.cards: dict[int, Card] = {}
        self.calls: list[str] = []
        self.fail_after: int | None = None
        self._next_id = 1
        self._saved = 0

    def find_by_id(self, card_id: CardId) -> Card | None:
        self.calls.append("find_by_id")
        return self.cards.get(card_id.value)

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        self.calls.append("find_by_deck")
        return [card for card in self.cards.values() if card.deck_id == deck_id]

    def count_by_deck(self, deck_id: DeckId) -> int:
        return sum(1 for card in self.cards.values() if card.deck_id == deck_id)

    def save(self, card: Card) -> Card:
        self.calls.append("save")
        if self.fail_after is not None and self._saved >= self.fail_after:
            raise RuntimeError("database unavailable")
        if not card.id.is_persisted:
            card = replace(card, id=CardId(self._next_id))
            self._next_id += 1
        self.cards[card.id.value] = card
        self._saved += 1
        return card

    def delete(self, card_id: CardId) -> bool:
        self.calls.append("delete")
        return self.cards.pop(card_id.value, None) is not None


class RecordingInvalidator:
    def __init__(self) -> None:
        self.invalidated: list[str] = []

    def invalidate(self, *views: str) -> None:
        self.invalidated.extend(views)


class StubAIService:
    def __init__(self, count: int = 20) -> None:
        self.count = count
        self.error: Exception | None = None
        self.calls: list[tuple[str, str]] = []

    async def generate_cards(self, deck_name: str, deck_description: str) -> list[GeneratedCard]:
        self.calls.append((deck_name, deck_description))
        if self.error is not None:
            raise self.error
        return [GeneratedCard(front=f"Term {i}", back=f"Definition {i}") for i in range(self.count)]


@pytest.fixture
def card_repository() -> InMemoryCardRepository:
    return InMemoryCardRepository()


@pytest.fixture
def deck_repository(card_repository: InMemoryCardRepository) -> InMemoryDeckRepository:
    repository = InMemoryDeckRepository()
    repository.cards = card_repository
    return repository


@pytest.fixture
def ownership_guard(
    deck_repository: InMemoryDeckRepository, card_repository: InMemoryCardRepository
) -> DeckOwnershipGuard:
    return DeckOwnershipGuard(deck_repository, card_repository)


@pytest.fixture
def entitlement_service() -> EntitlementService:
    return EntitlementService()


@pytest.fixture
def invalidator() -> RecordingInvalidator:
    return RecordingInvalidator()


@pytest.fixture
def alice() -> Caller:
    return Caller.create("alice")


@pytest.fixture
def bob() -> Caller:
    return Caller.create("bob")


@pytest.fixture
def alice_deck(deck_repository: InMemoryDeckRepository, alice: Caller) -> Deck:
    deck = Deck.create(alice.id, "Biology", "Cell structure and organelles")
    saved = deck_repository.save(deck)
    deck_repository.calls.clear()
    return saved


@pytest.fixture
def ai_service() -> StubAIService:
    return StubAIService()
