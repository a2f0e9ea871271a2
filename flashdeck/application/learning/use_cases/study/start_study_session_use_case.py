"""Use case for loading a deck for study."""

import structlog

from flashdeck.application.common.action import require_caller
from flashdeck.application.learning.protocols.card_repository import CardRepositoryProtocol
from flashdeck.application.learning.services.deck_ownership_guard import DeckOwnershipGuard
from flashdeck.application.learning.use_cases.dtos import StudyDeck
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.services.study_session import StudySession

logger = structlog.get_logger(__name__)


class StartStudySessionUseCase:
    """
    Hands the authorized card list of a deck to a study session.

    The session itself lives with the client; nothing about it is stored.
    """

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_guard: DeckOwnershipGuard,
    ) -> None:
        self.card_repository = card_repository
        self.ownership_guard = ownership_guard

    def start_session(
        self, caller: Caller | None, deck_id: int, shuffle_seed: int | None = None
    ) -> StudyDeck:
        """
        Get a deck's cards in study order.

        With a ``shuffle_seed`` the order is the session's shuffled order for
        that seed, so a client replays the same order from the same seed.

        Raises:
            UnauthorizedError: If the request had no identity
            DeckAccessDeniedError: If the deck is missing or not the caller's
        """
        user = require_caller(caller)
        deck = self.ownership_guard.verify_deck_ownership(DeckId(deck_id), user.id)

        cards = self.card_repository.find_by_deck(deck.id)
        if not cards:
            return StudyDeck(deck=deck, cards=[])

        session = StudySession(cards)
        if shuffle_seed is not None:
            session.toggle_shuffle(shuffle_seed)

        logger.debug("study_session_started", deck_id=deck_id, shuffled=session.is_shuffled)
        return StudyDeck(deck=deck, cards=list(session.cards), shuffle_seed=session.shuffle_seed)
