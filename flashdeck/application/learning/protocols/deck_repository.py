"""Protocol for Deck repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations in learning context."""

    def find_by_id_for_owner(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID, filtered by its owner in the same query.

        Args:
            deck_id: The deck ID
            user_id: The user ID that must own the deck

        Returns:
            Deck entity if it exists and is owned by the user, None otherwise
        """
        ...

    def find_by_owner_with_card_counts(self, user_id: UserId) -> list[tuple[Deck, int]]:
        """
        Get all decks of a user together with the number of cards in each.

        Returns:
            List of (deck, card_count) ordered by updated_at DESC
        """
        ...

    def count_by_owner(self, user_id: UserId) -> int:
        """Count decks owned by a user."""
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        ...

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck and, through the foreign key cascade, all of its cards.

        Returns:
            True if deleted, False if not found
        """
        ...
