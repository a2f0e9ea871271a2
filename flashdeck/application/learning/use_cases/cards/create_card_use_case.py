"""Use case for creating cards."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.card import Card, validate_card_side

logger = structlog.get_logger(__name__)


class CreateCardUseCase:
    """Use case for adding a hand-written card to a deck."""

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

    @mutation_action("Failed to create card")
    def create_card(self, caller: Caller | None, deck_id: int, front: str, back: str) -> Card:
        """
        Create a card in one of the caller's decks.

        Returns:
            Success with the created card, or Failure with an ActionError
            (unauthorized, validation_error, access_denied)
        """
        user = require_caller(caller)

        front = validate_card_side(front, "front")
        back = validate_card_side(back, "back")

        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)

        card = self.card_repository.save(Card.create(deck_id=deck.id, front=front, back=back))
        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("created_card", card_id=card.id.value, deck_id=deck_id)
        return card
