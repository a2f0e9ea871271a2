"""Custom exception hierarchy for Flashdeck application."""

from enum import StrEnum

from starlette import status


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

    code = "error"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def upgrade_required(self) -> bool:
        """Whether the caller should be offered a plan upgrade."""
        return False

    @property
    def requires_description(self) -> bool:
        """Whether the caller should be asked to improve the deck description."""
        return False


class UnauthorizedError(FlashdeckError):
    """No caller identity could be resolved."""

    code = "unauthorized"

    def __init__(self, message: str = "Unauthorized") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED)


class DeckAccessDeniedError(FlashdeckError):
    """Deck is missing or owned by someone else.

    Both cases share one message so callers cannot discover other users' deck ids.
    """

    code = "access_denied"

    def __init__(self, deck_id: int | None = None) -> None:
        """Initialize with the requested deck ID."""
        self.deck_id = deck_id
        super().__init__("Deck not found or access denied", status_code=status.HTTP_404_NOT_FOUND)


class DeckQuotaExceededError(FlashdeckError):
    """Caller reached the deck limit of their plan."""

    code = "deck_quota_exceeded"

    def __init__(self, limit: int) -> None:
        """Initialize with the plan limit that was hit."""
        self.limit = limit
        super().__init__(
            f"You have reached the limit of {limit} decks on the free plan. "
            "Upgrade to Pro to create unlimited decks.",
            status_code=status.HTTP_403_FORBIDDEN,
        )

    @property
    def upgrade_required(self) -> bool:
        return True


class FeatureNotAvailableError(FlashdeckError):
    """Caller's plan does not include the requested feature."""

    code = "feature_not_available"

    def __init__(self, feature: str, message: str | None = None) -> None:
        """Initialize with the missing feature name."""
        self.feature = feature
        super().__init__(
            message or f"Your plan does not include '{feature}'. Upgrade to unlock it.",
            status_code=status.HTTP_403_FORBIDDEN,
        )

    @property
    def upgrade_required(self) -> bool:
        return True


class DescriptionRequiredError(FlashdeckError):
    """AI generation needs a meaningful deck description."""

    code = "description_required"

    def __init__(self, min_length: int) -> None:
        """Initialize with the minimum description length."""
        self.min_length = min_length
        super().__init__(
            "Please add a meaningful description to your deck first "
            f"(at least {min_length} characters) so AI can generate relevant cards.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @property
    def requires_description(self) -> bool:
        return True


class ProviderFailureReason(StrEnum):
    """Classification of AI provider failures."""

    AUTH = "auth"
    QUOTA = "quota"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    OTHER = "other"


class AIProviderError(FlashdeckError):
    """The AI text-generation provider failed."""

    code = "ai_provider_error"

    def __init__(self, reason: ProviderFailureReason, message: str) -> None:
        """Initialize with failure reason and user-facing message."""
        self.reason = reason
        status_code = (
            status.HTTP_429_TOO_MANY_REQUESTS
            if reason == ProviderFailureReason.RATE_LIMIT
            else status.HTTP_502_BAD_GATEWAY
        )
        super().__init__(message, status_code=status_code)


class InsufficientOutputError(FlashdeckError):
    """The AI provider returned too few cards."""

    code = "insufficient_output"

    def __init__(self, received: int, minimum: int) -> None:
        """Initialize with received and required card counts."""
        self.received = received
        self.minimum = minimum
        super().__init__(
            f"AI generated only {received} cards (at least {minimum} required). "
            "Please try again.",
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
