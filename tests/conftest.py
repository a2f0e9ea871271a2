"""Pytest configuration and fixtures."""

import os

# Settings are cached on first use, so the test environment must be in place
# before anything from flashdeck is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256-signing"
os.environ["AI_PROVIDER"] = "openai"
os.environ["AI_MODEL_NAME"] = "gpt-4o-mini"
os.environ["OPENAI_API_KEY"] = "sk-test"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pydantic_ai.messages import ModelMessage, ModelResponse, ToolCallPart  # noqa: E402
from pydantic_ai.models.function import AgentInfo, FunctionModel  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from flashdeck import models  # noqa: E402
from flashdeck.application.learning.protocols.ai_card_generation_service import (  # noqa: E402
    GeneratedCard,
)
from flashdeck.core import container  # noqa: E402
from flashdeck.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from flashdeck.domain.identity.entitlements import Feature  # noqa: E402
from flashdeck.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from flashdeck.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_USER_ID = "user_2abcTestOwner"
OTHER_USER_ID = "user_2xyzSomeoneElse"
PRO_FEATURES = [Feature.UNLIMITED_DECKS.value, Feature.AI_FLASHCARD_GENERATION.value]


def auth_header(user_id: str, features: list[str] | None = None) -> dict[str, str]:
    """Authorization header carrying a token for the given user and plan features."""
    return {"Authorization": f"Bearer {create_access_token(user_id, features)}"}


def create_test_deck(
    db_session: Session,
    user_id: str = TEST_USER_ID,
    name: str = "Spanish Verbs",
    description: str | None = "Common irregular Spanish verbs in the present tense",
) -> models.Deck:
    """Helper to insert a deck directly into the database."""
    deck = models.Deck(user_id=user_id, name=name, description=description)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def create_test_card(
    db_session: Session,
    deck_id: int,
    front: str = "ser",
    back: str = "to be (permanent)",
) -> models.Card:
    """Helper to insert a card directly into the database."""
    card = models.Card(deck_id=deck_id, front=front, back=back)
    db_session.add(card)
    db_session.commit()
    db_session.refresh(card)
    return card


def make_generated_cards(count: int) -> list[GeneratedCard]:
    return [GeneratedCard(front=f"Question {i}", back=f"Answer {i}") for i in range(1, count + 1)]


def card_batch_model(count: int) -> FunctionModel:
    """Model that answers every run with a structured batch of `count` cards."""

    def respond(_messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        cards = [{"front": f"Term {i}", "back": f"Definition {i}"} for i in range(1, count + 1)]
        return ModelResponse(
            parts=[ToolCallPart(tool_name=info.output_tools[0].name, args={"cards": cards})]
        )

    return FunctionModel(respond)


class FakeAIService:
    """Stands in for the AI provider; returns a fixed batch or raises a fixed error."""

    def __init__(
        self, cards: list[GeneratedCard] | None = None, error: Exception | None = None
    ) -> None:
        self.cards = cards or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate_cards(self, deck_name: str, deck_description: str) -> list[GeneratedCard]:
        self.calls.append((deck_name, deck_description))
        if self.error is not None:
            raise self.error
        return list(self.cards)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def fake_ai_service() -> Generator[FakeAIService, None, None]:
    """Replace the AI provider for the duration of a test."""
    fake = FakeAIService(cards=make_generated_cards(20))
    container.ai_service.override(fake)
    try:
        yield fake
    finally:
        container.ai_service.reset_override()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Caller on the free plan."""
    return auth_header(TEST_USER_ID)


@pytest.fixture
def pro_headers() -> dict[str, str]:
    """Same caller with unlimited decks and AI generation."""
    return auth_header(TEST_USER_ID, PRO_FEATURES)


@pytest.fixture
def other_headers() -> dict[str, str]:
    """A different user with every feature."""
    return auth_header(OTHER_USER_ID, PRO_FEATURES)


@pytest.fixture
def test_deck(db_session: Session) -> models.Deck:
    """Deck owned by the test user."""
    return create_test_deck(db_session)


@pytest.fixture
def other_deck(db_session: Session) -> models.Deck:
    """Deck owned by another user."""
    return create_test_deck(db_session, user_id=OTHER_USER_ID, name="Someone else's deck")


@pytest.fixture
def test_cards(db_session: Session, test_deck: models.Deck) -> list[models.Card]:
    """Three cards in the test deck."""
    return [
        create_test_card(db_session, test_deck.id, front="ser", back="to be (permanent)"),
        create_test_card(db_session, test_deck.id, front="estar", back="to be (temporary)"),
        create_test_card(db_session, test_deck.id, front="ir", back="to go"),
    ]
