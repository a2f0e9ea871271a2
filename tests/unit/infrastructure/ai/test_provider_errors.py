import httpx
import pytest
from pydantic_ai.exceptions import ModelHTTPError

from flashdeck.exceptions import ProviderFailureReason
from flashdeck.infrastructure.ai.provider_errors import classify_provider_error, to_provider_error


class TestClassifyProviderError:
    @pytest.mark.parametrize(
        ("status_code", "body", "expected"),
        [
            (401, None, ProviderFailureReason.AUTH),
            (403, None, ProviderFailureReason.AUTH),
            (402, None, ProviderFailureReason.QUOTA),
            (429, {"error": {"code": "insufficient_quota"}}, ProviderFailureReason.QUOTA),
            (429, {"error": "slow down"}, ProviderFailureReason.RATE_LIMIT),
            (500, None, ProviderFailureReason.OTHER),
        ],
    )
    def test_http_errors(self, status_code, body, expected) -> None:
        error = ModelHTTPError(status_code=status_code, model_name="gpt-4o-mini", body=body)

        assert classify_provider_error(error) == expected

    def test_transport_errors_are_network(self) -> None:
        error = httpx.ConnectError("refused")
        assert classify_provider_error(error) == ProviderFailureReason.NETWORK
        assert classify_provider_error(TimeoutError()) == ProviderFailureReason.NETWORK

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("Incorrect API key provided", ProviderFailureReason.AUTH),
            ("You exceeded your current quota", ProviderFailureReason.QUOTA),
            ("Rate limit reached for requests", ProviderFailureReason.RATE_LIMIT),
            ("fetch failed", ProviderFailureReason.NETWORK),
            ("model produced invalid JSON", ProviderFailureReason.OTHER),
        ],
    )
    def test_message_heuristics(self, message, expected) -> None:
        assert classify_provider_error(RuntimeError(message)) == expected


class TestToProviderError:
    def test_known_reason_has_fixed_message(self) -> None:
        error = to_provider_error(RuntimeError("Incorrect API key provided: sk-abc"))

        assert error.reason == ProviderFailureReason.AUTH
        assert "sk-abc" not in error.message
        assert error.status_code == 502

    def test_rate_limit_maps_to_429(self) -> None:
        error = to_provider_error(ModelHTTPError(status_code=429, model_name="m", body=None))

        assert error.status_code == 429

    def test_other_echoes_provider_message(self) -> None:
        error = to_provider_error(RuntimeError("model overloaded"))

        assert error.reason == ProviderFailureReason.OTHER
        assert error.message == "Failed to generate cards: model overloaded"
