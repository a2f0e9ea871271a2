"""Tests for AI card generation against in-memory collaborators."""

import pytest

from flashdeck.application.learning.use_cases.cards.generate_cards_use_case import (
    GenerateCardsUseCase,
)
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import AIProviderError, ProviderFailureReason
from flashdeck.infrastructure.ai.ai_service import AIService
from tests.conftest import card_batch_model


@pytest.fixture
def pro(alice) -> Caller:
    return Caller.create(alice.id.value, ["ai_flashcard_generation"])


@pytest.fixture
def use_case(
    card_repository, ownership_guard, entitlement_service, ai_service, invalidator
) -> GenerateCardsUseCase:
    return GenerateCardsUseCase(
        card_repository, ownership_guard, entitlement_service, ai_service, invalidator
    )


class TestGenerateCards:
    @pytest.mark.asyncio
    async def test_saves_every_generated_card(
        self, use_case, ai_service, card_repository, invalidator, pro, alice_deck
    ):
        ai_service.count = 17

        result = await use_case.generate_cards(pro, alice_deck.id.value)

        assert result.unwrap().count == 17
        assert card_repository.count_by_deck(alice_deck.id) == 17
        assert ai_service.calls == [("Biology", "Cell structure and organelles")]
        assert invalidator.invalidated == ["/dashboard", f"/decks/{alice_deck.id.value}"]

    @pytest.mark.asyncio
    async def test_too_few_cards_saves_nothing(
        self, use_case, ai_service, card_repository, invalidator, pro, alice_deck
    ):
        ai_service.count = 10

        error = (await use_case.generate_cards(pro, alice_deck.id.value)).unwrap_error()

        assert error.code == "insufficient_output"
        assert card_repository.cards == {}
        assert invalidator.invalidated == []

    @pytest.mark.asyncio
    async def test_exactly_minimum_is_accepted(self, use_case, ai_service, pro, alice_deck):
        ai_service.count = 15

        result = await use_case.generate_cards(pro, alice_deck.id.value)

        assert result.unwrap().count == 15

    @pytest.mark.asyncio
    async def test_partial_save_keeps_saved_cards(
        self, use_case, ai_service, card_repository, invalidator, pro, alice_deck
    ):
        ai_service.count = 20
        card_repository.fail_after = 7

        error = (await use_case.generate_cards(pro, alice_deck.id.value)).unwrap_error()

        assert error.code == "generated_cards_not_saved"
        assert "7 of 20" in error.message
        assert card_repository.count_by_deck(alice_deck.id) == 7
        assert "/dashboard" in invalidator.invalidated

    @pytest.mark.asyncio
    async def test_requires_feature(self, use_case, ai_service, alice, alice_deck):
        error = (await use_case.generate_cards(alice, alice_deck.id.value)).unwrap_error()

        assert error.code == "feature_not_available"
        assert error.upgrade_required is True
        assert ai_service.calls == []

    @pytest.mark.asyncio
    async def test_short_description_requires_description(
        self, use_case, ai_service, deck_repository, pro
    ):
        deck = deck_repository.save(Deck.create(pro.id, "Biology", "  cells  "))

        error = (await use_case.generate_cards(pro, deck.id.value)).unwrap_error()

        assert error.code == "description_required"
        assert error.requires_description is True
        assert error.status_code == 400
        assert ai_service.calls == []

    @pytest.mark.asyncio
    async def test_explicit_description_wins(self, use_case, ai_service, deck_repository, pro):
        deck = deck_repository.save(Deck.create(pro.id, "Biology"))

        result = await use_case.generate_cards(
            pro,
            deck.id.value,
            deck_name="Cell biology",
            deck_description="  Organelles and membranes  ",
        )

        assert result.is_success
        assert ai_service.calls == [("Cell biology", "Organelles and membranes")]

    @pytest.mark.asyncio
    async def test_ownership_checked_before_feature(self, use_case, ai_service, bob, alice_deck):
        pro_bob = Caller.create(bob.id.value, ["ai_flashcard_generation"])

        for caller in (bob, pro_bob):
            error = (await use_case.generate_cards(caller, alice_deck.id.value)).unwrap_error()
            assert error.code == "access_denied"
        assert ai_service.calls == []

    @pytest.mark.asyncio
    async def test_provider_error_is_reported(self, use_case, ai_service, pro, alice_deck):
        ai_service.error = AIProviderError(
            ProviderFailureReason.RATE_LIMIT, "The AI service is busy. Please try again shortly."
        )

        error = (await use_case.generate_cards(pro, alice_deck.id.value)).unwrap_error()

        assert error.code == "ai_provider_error"
        assert error.reason == "rate_limit"
        assert error.status_code == 429

    @pytest.mark.asyncio
    async def test_unauthorized(self, use_case, ai_service, card_repository, alice_deck):
        error = (await use_case.generate_cards(None, alice_deck.id.value)).unwrap_error()

        assert error.code == "unauthorized"
        assert ai_service.calls == []


class TestGenerateCardsWithAgent:
    @pytest.mark.asyncio
    async def test_short_agent_batch_is_insufficient_output(
        self, card_repository, ownership_guard, entitlement_service, invalidator, pro, alice_deck
    ):
        use_case = GenerateCardsUseCase(
            card_repository,
            ownership_guard,
            entitlement_service,
            AIService(model=card_batch_model(10)),
            invalidator,
        )

        error = (await use_case.generate_cards(pro, alice_deck.id.value)).unwrap_error()

        assert error.code == "insufficient_output"
        assert card_repository.cards == {}
