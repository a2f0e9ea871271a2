from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.use_cases.cards.create_card_use_case import (
    CreateCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.delete_card_use_case import (
    DeleteCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.generate_cards_use_case import (
    GenerateCardsUseCase,
)
from flashdeck.application.learning.use_cases.cards.update_card_use_case import (
    UpdateCardUseCase,
)
from flashdeck.application.learning.use_cases.decks.create_deck_use_case import (
    CreateDeckUseCase,
)
from flashdeck.application.learning.use_cases.decks.delete_deck_use_case import (
    DeleteDeckUseCase,
)
from flashdeck.application.learning.use_cases.decks.get_dashboard_use_case import (
    GetDashboardUseCase,
)
from flashdeck.application.learning.use_cases.decks.get_deck_use_case import GetDeckUseCase
from flashdeck.application.learning.use_cases.decks.update_deck_use_case import (
    UpdateDeckUseCase,
)
from flashdeck.application.learning.use_cases.study.start_study_session_use_case import (
    StartStudySessionUseCase,
)
from flashdeck.config import get_settings
from flashdeck.infrastructure.ai.ai_service import AIService
from flashdeck.infrastructure.common.view_registry import ViewRegistry
from flashdeck.infrastructure.identity.services.entitlement_service import EntitlementService
from flashdeck.infrastructure.learning.repositories import CardRepository, DeckRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)

    # External collaborators
    entitlement_service = providers.Singleton(
        EntitlementService,
        default_features=settings.provided.DEFAULT_FEATURES,
    )
    ai_service = providers.Singleton(AIService)
    view_registry = providers.Singleton(ViewRegistry)

    # Application services
    ownership_guard = providers.Factory(
        DeckOwnershipGuard,
        deck_repository=deck_repository,
        card_repository=card_repository,
    )

    # Deck use cases
    create_deck_use_case = providers.Factory(
        CreateDeckUseCase,
        deck_repository=deck_repository,
        entitlement_service=entitlement_service,
        view_invalidator=view_registry,
        deck_limit=settings.provided.FREE_PLAN_DECK_LIMIT,
    )
    update_deck_use_case = providers.Factory(
        UpdateDeckUseCase,
        deck_repository=deck_repository,
        ownership_guard=ownership_guard,
        view_invalidator=view_registry,
    )
    delete_deck_use_case = providers.Factory(
        DeleteDeckUseCase,
        deck_repository=deck_repository,
        ownership_guard=ownership_guard,
        view_invalidator=view_registry,
    )
    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        deck_repository=deck_repository,
        entitlement_service=entitlement_service,
        deck_limit=settings.provided.FREE_PLAN_DECK_LIMIT,
    )
    get_deck_use_case = providers.Factory(
        GetDeckUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
    )

    # Card use cases
    create_card_use_case = providers.Factory(
        CreateCardUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
        view_invalidator=view_registry,
    )
    update_card_use_case = providers.Factory(
        UpdateCardUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
        view_invalidator=view_registry,
    )
    delete_card_use_case = providers.Factory(
        DeleteCardUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
        view_invalidator=view_registry,
    )
    generate_cards_use_case = providers.Factory(
        GenerateCardsUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
        entitlement_service=entitlement_service,
        ai_service=ai_service,
        view_invalidator=view_registry,
    )

    # Study
    start_study_session_use_case = providers.Factory(
        StartStudySessionUseCase,
        card_repository=card_repository,
        ownership_guard=ownership_guard,
    )


# Initialize container
container = Container()
