from datetime import timedelta

import jwt

from flashdeck.config import get_settings
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.domain.identity.entitlements import Feature
from flashdeck.infrastructure.identity.services.entitlement_service import EntitlementService
from flashdeck.infrastructure.identity.services.token_service import (
    ALGORITHM,
    create_access_token,
    verify_access_token,
)


class TestTokenService:
    def test_round_trip_keeps_features(self) -> None:
        token = create_access_token("user-1", ["unlimited_decks"])

        caller = verify_access_token(token)

        assert caller is not None
        assert caller.id.value == "user-1"
        assert caller.has_feature("unlimited_decks")
        assert not caller.has_feature("ai_flashcard_generation")

    def test_expired_token(self) -> None:
        token = create_access_token("user-1", expires_in=timedelta(seconds=-5))

        assert verify_access_token(token) is None

    def test_wrong_signature(self) -> None:
        token = jwt.encode({"sub": "user-1"}, "another-secret-key-of-enough-length", ALGORITHM)

        assert verify_access_token(token) is None

    def test_missing_subject(self) -> None:
        token = jwt.encode({"features": []}, get_settings().SECRET_KEY, ALGORITHM)

        assert verify_access_token(token) is None

    def test_malformed_features_claim(self) -> None:
        token = jwt.encode(
            {"sub": "user-1", "features": "unlimited_decks"}, get_settings().SECRET_KEY, ALGORITHM
        )

        assert verify_access_token(token) is None

    def test_garbage(self) -> None:
        assert verify_access_token("not-a-token") is None


class TestEntitlementService:
    def test_feature_from_token(self) -> None:
        service = EntitlementService()
        caller = Caller.create("user-1", ["ai_flashcard_generation"])

        assert service.has_feature(caller, Feature.AI_FLASHCARD_GENERATION)
        assert not service.has_feature(caller, Feature.UNLIMITED_DECKS)

    def test_feature_suffixed_claim_name_is_accepted(self) -> None:
        token = create_access_token("user-1", ["ai_flashcard_generation_feature"])

        caller = verify_access_token(token)

        assert caller is not None
        assert EntitlementService().has_feature(caller, Feature.AI_FLASHCARD_GENERATION)

    def test_default_features_grant_everyone(self) -> None:
        service = EntitlementService(default_features=["unlimited_decks"])

        assert service.has_feature(Caller.create("user-2"), Feature.UNLIMITED_DECKS)
