"""Protocol for Card repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import CardId, DeckId
from flashdeck.domain.learning.entities.card import Card


class CardRepositoryProtocol(Protocol):
    """
    Protocol for Card repository operations.

    Cards carry no owner, so nothing here checks ownership: callers must
    authorize the parent deck first.
    """

    def find_by_id(self, card_id: CardId) -> Card | None:
        """Find a card by ID."""
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        """
        Get all cards of a deck.

        Returns:
            List of card entities in creation order
        """
        ...

    def count_by_deck(self, deck_id: DeckId) -> int:
        """Count cards of a deck."""
        ...

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Returns:
            Saved card entity with database-generated values
        """
        ...

    def delete(self, card_id: CardId) -> bool:
        """
        Delete a card.

        Returns:
            True if deleted, False if not found
        """
        ...
