"""Use case for reading a deck and its cards."""

from flashdeck.application.common.action import require_caller
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.use_cases.dtos import DeckWithCards
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.card import Card


class GetDeckUseCase:
    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
    ) -> None:
        self.card_repository = card_repository
        self.ownership_guard = ownership_guard

    def get_deck(self, caller: Caller | None, deck_id: int) -> DeckWithCards:
        """
        Get a deck with its cards in creation order.

        Raises:
            UnauthorizedError: If the request had no identity
            DeckAccessDeniedError: If the deck is missing or not the caller's
        """
        user = require_caller(caller)
        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)
        return DeckWithCards(deck=deck, cards=self.card_repository.find_by_deck(deck.id))

    def get_cards(self, caller: Caller | None, deck_id: int) -> list[Card]:
        """Get the cards of one of the caller's decks."""
        return self.get_deck(caller, deck_id).cards
