"""API route serving decks for study sessions."""

from fastapi import APIRouter, Depends, Query, status

from flashdeck.application.learning.use_cases.study.start_study_session_use_case import (
    StartStudySessionUseCase,
)
from flashdeck.core import container
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentCaller
from flashdeck.infrastructure.learning.schemas import StudyDeckResponse

router = APIRouter(prefix="/decks", tags=["study"])


@router.get(
    "/{deck_id}/study", response_model=StudyDeckResponse, status_code=status.HTTP_200_OK
)
def get_study_deck(
    deck_id: int,
    caller: CurrentCaller,
    shuffle_seed: int | None = Query(None, description="Shuffle the cards with this seed"),
    use_case: StartStudySessionUseCase = Depends(
        inject_use_case(container.start_study_session_use_case)
    ),
) -> StudyDeckResponse:
    """
    Get a deck's cards in study order.

    Without a seed the cards come in creation order. Scoring and progress
    stay with the client; nothing about the session is stored.
    """
    study_deck = use_case.start_session(caller, deck_id, shuffle_seed=shuffle_seed)
    return StudyDeckResponse.from_dto(study_deck)
