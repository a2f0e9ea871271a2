"""Use case for creating decks."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.identity.protocols.entitlement_service import (
    EntitlementServiceProtocol,
)
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import DeckQuotaExceededError

logger = structlog.get_logger(__name__)


class CreateDeckUseCase:
    """Use case for creating decks within the caller's plan quota."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        entitlement_service: EntitlementServiceProtocol,
        view_invalidator: ViewInvalidatorProtocol,
        deck_limit: int,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository
        self.entitlement_service = entitlement_service
        self.view_invalidator = view_invalidator
        self.deck_limit = deck_limit

    @mutation_action("Failed to create deck")
    def create_deck(
        self, caller: Caller | None, name: str, description: str | None = None
    ) -> Deck:
        """
        Create a new deck for the caller.

        Callers without unlimited decks may own at most ``deck_limit`` decks.
        The count and the insert are separate statements, so two concurrent
        requests can both pass the check.

        Args:
            caller: Authenticated caller, None if the request had no identity
            name: Deck name
            description: Optional description

        Returns:
            Success with the created deck, or Failure with an ActionError
            (unauthorized, validation_error, deck_quota_exceeded)
        """
        user = require_caller(caller)

        deck = Deck.create(user_id=user.id, name=name, description=description)

        if not self.entitlement_service.has_feature(user, Feature.UNLIMITED_DECKS):
            deck_count = self.deck_repository.count_by_owner(user.id)
            if deck_count >= self.deck_limit:
                logger.info("deck_quota_exceeded", user_id=user.id.value, deck_count=deck_count)
                raise DeckQuotaExceededError(self.deck_limit)

        deck = self.deck_repository.save(deck)
        self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("created_deck", deck_id=deck.id.value, user_id=user.id.value)
        return deck
