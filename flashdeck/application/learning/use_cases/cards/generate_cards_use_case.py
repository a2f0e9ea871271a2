"""Use case for generating cards with AI."""

import structlog

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.view_invalidator import ViewInvalidatorProtocol
from flashdeck.application.identity.protocols.entitlement_service import (
    EntitlementServiceProtocol,
)
from flashdeck.application.learning.protocols.ai_card_generation_service import (
    AICardGenerationServiceProtocol,
)
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.use_cases.dtos import GeneratedCardsResult
from flashdeck.application.learning.use_cases.exceptions import GeneratedCardsNotSavedError
from flashdeck.application.learning.views import DASHBOARD_VIEW, deck_view
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.generation import (
    MIN_DESCRIPTION_LENGTH_FOR_GENERATION,
    MIN_GENERATED_CARDS,
)
from flashdeck.exceptions import (
    DescriptionRequiredError,
    FeatureNotAvailableError,
    InsufficientOutputError,
)

logger = structlog.get_logger(__name__)


class GenerateCardsUseCase:
    """Use case for filling a deck with AI-generated cards."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
        entitlement_service: EntitlementServiceProtocol,
        ai_service: AICardGenerationServiceProtocol,
        view_invalidator: ViewInvalidatorProtocol,
    ) -> None:
        """Initialize use case with repository and service protocols."""
        self.card_repository = card_repository
        self.ownership_guard = ownership_guard
        self.entitlement_service = entitlement_service
        self.ai_service = ai_service
        self.view_invalidator = view_invalidator

    @mutation_action("Failed to generate cards")
    async def generate_cards(
        self,
        caller: Caller | None,
        deck_id: int,
        deck_name: str | None = None,
        deck_description: str | None = None,
    ) -> GeneratedCardsResult:
        """
        Generate a batch of cards for a deck from its name and description.

        Name and description default to the stored deck values. Cards are
        saved one by one: if saving stops part way, the cards saved so far
        are kept and the failure reports how many made it.

        Args:
            caller: Authenticated caller, None if the request had no identity
            deck_id: ID of the deck to fill
            deck_name: Topic name to use instead of the stored deck name
            deck_description: Description to use instead of the stored one

        Returns:
            Success with the number of saved cards, or Failure with an
            ActionError (unauthorized, access_denied, feature_not_available,
            description_required, ai_provider_error, insufficient_output)
        """
        user = require_caller(caller)

        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)

        if not self.entitlement_service.has_feature(user, Feature.AI_FLASHCARD_GENERATION):
            raise FeatureNotAvailableError(
                Feature.AI_FLASHCARD_GENERATION,
                "AI flashcard generation is a Pro feature. Upgrade to generate cards with AI.",
            )

        description = deck_description if deck_description is not None else deck.description
        description = (description or "").strip()
        if len(description) < MIN_DESCRIPTION_LENGTH_FOR_GENERATION:
            raise DescriptionRequiredError(MIN_DESCRIPTION_LENGTH_FOR_GENERATION)

        generated = await self.ai_service.generate_cards(deck_name or deck.name, description)
        if len(generated) < MIN_GENERATED_CARDS:
            logger.warning(
                "insufficient_generated_cards", deck_id=deck_id, received=len(generated)
            )
            raise InsufficientOutputError(len(generated), MIN_GENERATED_CARDS)

        saved = 0
        try:
            for pair in generated:
                self.card_repository.save(
                    Card.create(deck_id=deck.id, front=pair.front, back=pair.back)
                )
                saved += 1
        except Exception as e:
            logger.error(
                "generated_cards_partially_saved",
                deck_id=deck_id,
                saved=saved,
                total=len(generated),
                exc_info=e,
            )
            raise GeneratedCardsNotSavedError(saved, len(generated)) from e
        finally:
            if saved:
                self.view_invalidator.invalidate(DASHBOARD_VIEW, deck_view(deck.id))

        logger.info("generated_cards", deck_id=deck_id, count=saved)
        return GeneratedCardsResult(deck_id=deck.id, count=saved)
