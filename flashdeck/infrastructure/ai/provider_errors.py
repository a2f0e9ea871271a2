"""Classification of AI provider failures into user-facing messages."""

import httpx
from pydantic_ai.exceptions import ModelHTTPError

from flashdeck.exceptions import AIProviderError, ProviderFailureReason

_MESSAGES = {
    ProviderFailureReason.AUTH: (
        "AI service authentication failed. Please check the API key configuration."
    ),
    ProviderFailureReason.QUOTA: (
        "AI service quota exceeded. Please check the provider's billing details."
    ),
    ProviderFailureReason.RATE_LIMIT: (
        "AI service is receiving too many requests. Please wait a moment and try again."
    ),
    ProviderFailureReason.NETWORK: (
        "Could not reach the AI service. Please check the connection and try again."
    ),
}

_QUOTA_MARKERS = ("quota", "billing", "insufficient_quota", "credit")
_AUTH_MARKERS = ("api key", "api_key", "unauthorized", "authentication", "invalid key")
_RATE_LIMIT_MARKERS = ("rate limit", "rate_limit", "too many requests")
_NETWORK_MARKERS = ("network", "connection", "fetch failed", "timed out", "timeout")


def _contains(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


def classify_provider_error(error: Exception) -> ProviderFailureReason:
    """Work out why a provider call failed from the exception it raised."""
    if isinstance(error, ModelHTTPError):
        body = str(error.body or "").lower()
        if error.status_code in (401, 403):
            return ProviderFailureReason.AUTH
        if error.status_code == 402 or _contains(body, _QUOTA_MARKERS):
            return ProviderFailureReason.QUOTA
        if error.status_code == 429:
            return ProviderFailureReason.RATE_LIMIT
        return ProviderFailureReason.OTHER

    if isinstance(error, httpx.TransportError | ConnectionError | TimeoutError):
        return ProviderFailureReason.NETWORK

    message = str(error).lower()
    if _contains(message, _AUTH_MARKERS):
        return ProviderFailureReason.AUTH
    if _contains(message, _QUOTA_MARKERS):
        return ProviderFailureReason.QUOTA
    if _contains(message, _RATE_LIMIT_MARKERS):
        return ProviderFailureReason.RATE_LIMIT
    if _contains(message, _NETWORK_MARKERS):
        return ProviderFailureReason.NETWORK
    return ProviderFailureReason.OTHER


def to_provider_error(error: Exception) -> AIProviderError:
    """Wrap a provider exception; unclassified failures echo the provider message."""
    reason = classify_provider_error(error)
    message = _MESSAGES.get(reason) or f"Failed to generate cards: {error}"
    return AIProviderError(reason, message)
