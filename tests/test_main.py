"""Tests for service endpoints."""

from fastapi import status
from fastapi.testclient import TestClient


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert "Flashdeck" in response.json()["message"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "healthy"}


def test_api_root(client: TestClient) -> None:
    response = client.get("/api/v1/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Flashdeck API"


def test_public_settings(client: TestClient) -> None:
    response = client.get("/api/v1/settings")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["feature_flags"] == {"ai": True}
    assert data["free_plan_deck_limit"] == 3
