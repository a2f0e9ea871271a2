"""
Ownership guard for decks and cards.

Cards have no owner of their own; every card is authorized through its deck.
The owner filter is part of the repository query, so there is no follow-up
comparison to forget.
"""

import structlog

from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.domain.common.value_objects.ids import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import DeckAccessDeniedError

logger = structlog.get_logger(__name__)


class DeckOwnershipGuard:
    """Resolves decks and cards only for the user that owns them."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.card_repository = card_repository

    def verify_deck_ownership(self, deck_id: DeckId, user_id: UserId) -> Deck:
        """
        Load a deck owned by the user.

        Raises:
            DeckAccessDeniedError: If the deck does not exist or belongs to
                someone else (the two cases are indistinguishable)
        """
        deck = self.deck_repository.find_by_id_for_owner(deck_id, user_id)
        if deck is None:
            logger.info("deck_access_denied", deck_id=deck_id.value)
            raise DeckAccessDeniedError(deck_id.value)
        return deck

    def verify_card_ownership(self, card_id: CardId, user_id: UserId) -> tuple[Deck, Card]:
        """
        Load a card and its deck, authorizing through the deck.

        Raises:
            DeckAccessDeniedError: If the card does not exist or its deck is
                not owned by the user
        """
        card = self.card_repository.find_by_id(card_id)
        if card is None:
            logger.info("card_access_denied", card_id=card_id.value)
            raise DeckAccessDeniedError
        deck = self.verify_deck_ownership(card.deck_id, user_id)
        return deck, card
