"""Use case for updating decks."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.deck import (
    Deck,
    validate_deck_description,
    validate_deck_name,
)

logger = structlog.get_logger(__name__)


class UpdateDeckUseCase:
    """Use case for renaming decks and changing their description."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository
        self.ownership_guard = ownership_guard
        self.view_invalidator = view_invalidator

    @mutation_action("Failed to update deck")
    def update_deck(
        self,
        caller: Caller | None,
        deck_id: int,
        name: str,
        description: str | None = None,
    ) -> Deck:
        """
        Replace a deck's name and description.

        Returns:
            Success with the updated deck, or Failure with an ActionError
            (unauthorized, validation_error, access_denied)
        """
        user = require_caller(caller)

        name = validate_deck_name(name)
        description = validate_deck_description(description)

        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)
        deck.update_details(name, description)
        deck = self.deck_repository.save(deck)

        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("updated_deck", deck_id=deck_id)
        return deck
