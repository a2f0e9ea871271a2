"""Use case for deleting cards."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import CardId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.exceptions import DeckAccessDeniedError

logger = structlog.get_logger(__name__)


class DeleteCardUseCase:
    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        self.card_repository = card_repository
        self.ownership_guard = ownership_guard
        self.view_invalidator = view_invalidator

    @mutation_action("Failed to delete card")
    def delete_card(self, caller: Caller | None, card_id: int) -> CardId:
        """
        Delete a card from one of the caller's decks.

        Returns:
            Success with the deleted card's ID, or Failure with an ActionError
            (unauthorized, access_denied)
        """
        user = require_caller(caller)

        deck, card = self.ownership_guard.verify_card_ownership(CardId(card_id), user.id)
        if not self.card_repository.delete(card.id):
            raise DeckAccessDeniedError(deck.id.value)

        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("deleted_card", card_id=card_id, deck_id=deck.id.value)
        return card.id
