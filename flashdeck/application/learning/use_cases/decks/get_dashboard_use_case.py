"""Use case for the caller's deck dashboard."""

from flashdeck.application.common.action import require_caller
from flashdeck.application.identity.protocols.entitlement_service import (
    EntitlementServiceProtocol,
)
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.use_cases.dtos import Dashboard, DeckWithCardCount
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature


class GetDashboardUseCase:
    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        entitlement_service: EntitlementServiceProtocol,
        deck_limit: int,
    ) -> None:
        self.deck_repository = deck_repository
        self.entitlement_service = entitlement_service
        self.deck_limit = deck_limit

    def get_dashboard(self, caller: Caller | None) -> Dashboard:
        """
        List the caller's decks with card counts and plan limits.

        Raises:
            UnauthorizedError: If the request had no identity
        """
        user = require_caller(caller)

        decks = [
            DeckWithCardCount(deck=deck, card_count=card_count)
            for deck, card_count in self.deck_repository.find_by_owner_with_card_counts(user.id)
        ]
        unlimited = self.entitlement_service.has_feature(user, Feature.UNLIMITED_DECKS)
        deck_limit = None if unlimited else self.deck_limit

        return Dashboard(
            decks=decks,
            deck_limit=deck_limit,
            can_create_deck=deck_limit is None or len(decks) < deck_limit,
            can_generate_cards=self.entitlement_service.has_feature(
                user, Feature.AI_FLASHCARD_GENERATION
            ),
        )
