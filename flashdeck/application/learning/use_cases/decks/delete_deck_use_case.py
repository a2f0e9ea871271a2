"""Use case for deleting decks."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.exceptions import DeckAccessDeniedError

logger = structlog.get_logger(__name__)


class DeleteDeckUseCase:
    """Use case for deleting decks together with their cards."""

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

    @mutation_action("Failed to delete deck")
    def delete_deck(self, caller: Caller | None, deck_id: int) -> DeckId:
        """
        Delete a deck; its cards go with it.

        Returns:
            Success with the deleted deck's ID, or Failure with an ActionError
            (unauthorized, access_denied)
        """
        user = require_caller(caller)

        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)
        if not self.deck_repository.delete(deck.id, user.id):
            raise DeckAccessDeniedError(deck_id)

        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("deleted_deck", deck_id=deck_id)
        return deck.id
