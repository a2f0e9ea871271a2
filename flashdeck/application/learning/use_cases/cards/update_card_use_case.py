"""Use case for updating cards."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import CardId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.card import Card, validate_card_side

logger = structlog.get_logger(__name__)


class UpdateCardUseCase:
    """Use case for editing both sides of a card."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.card_repository = card_repository
        self.ownership_guard = ownership_guard
        self.view_invalidator = view_invalidator

    @mutation_action("Failed to update card")
    def update_card(self, caller: Caller | None, card_id: int, front: str, back: str) -> Card:
        """
        Replace the front and back of a card.

        Returns:
            Success with the updated card, or Failure with an ActionError
            (unauthorized, validation_error, access_denied)
        """
        user = require_caller(caller)

        front = validate_card_side(front, "front")
        back = validate_card_side(back, "back")

        deck, card = self.ownership_guard.verify_card_ownership(CardId(card_id), user.id)
        card.update_content(front, back)
        card = self.card_repository.save(card)

        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("updated_card", card_id=card_id, deck_id=deck.id.value)
        return card
