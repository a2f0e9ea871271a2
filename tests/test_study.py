"""Tests for the study endpoint."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.domain.learning.services.study_session import seeded_shuffle
from tests.conftest import create_test_card, create_test_deck


class TestGetStudyDeck:
    """Test suite for GET /decks/:id/study endpoint."""

    def test_cards_in_creation_order_without_seed(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
        test_cards: list[models.Card],
    ) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}/study", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["deck"]["id"] == test_deck.id
        assert data["shuffled"] is False
        assert data["shuffle_seed"] is None
        assert [card["id"] for card in data["cards"]] == [card.id for card in test_cards]

    def test_seed_gives_reproducible_order(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers: dict[str, str],
        test_deck: models.Deck,
    ) -> None:
        cards = [create_test_card(db_session, test_deck.id, front=f"Q{i}") for i in range(8)]
        url = f"/api/v1/decks/{test_deck.id}/study?shuffle_seed=1700000000000"

        first = client.get(url, headers=auth_headers).json()
        second = client.get(url, headers=auth_headers).json()

        assert first["shuffled"] is True
        assert first["shuffle_seed"] == 1700000000000
        first_order = [card["id"] for card in first["cards"]]
        assert first_order == [card["id"] for card in second["cards"]]
        assert first_order == seeded_shuffle([card.id for card in cards], 1700000000000)
        assert sorted(first_order) == sorted(card.id for card in cards)

    def test_empty_deck(
        self, client: TestClient, db_session: Session, auth_headers: dict[str, str]
    ) -> None:
        deck = create_test_deck(db_session, name="Empty")

        response = client.get(f"/api/v1/decks/{deck.id}/study", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["cards"] == []

    def test_other_users_deck(
        self, client: TestClient, auth_headers: dict[str, str], other_deck: models.Deck
    ) -> None:
        response = client.get(f"/api/v1/decks/{other_deck.id}/study", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_without_caller(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}/study")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
