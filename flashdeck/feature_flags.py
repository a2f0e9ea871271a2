"""Server capabilities that clients can query before offering a feature."""

from pydantic import BaseModel, Field

from flashdeck.config import get_settings


class FeatureFlags(BaseModel):
    ai: bool = Field(..., description="An AI provider is configured for card generation")


def get_feature_flags() -> FeatureFlags:
    """
    Read the flags from settings.

    These describe the server, not the caller's plan: generating cards also
    needs the ``ai_flashcard_generation`` plan feature.
    """
    return FeatureFlags(ai=get_settings().ai_enabled)


def is_ai_enabled() -> bool:
    return get_feature_flags().ai
