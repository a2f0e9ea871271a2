"""Named capabilities granted by a caller's plan."""

from enum import StrEnum


class Feature(StrEnum):
    """Plan features checked by the application."""

    UNLIMITED_DECKS = "unlimited_decks"
    AI_FLASHCARD_GENERATION = "ai_flashcard_generation"


# Claim names some identity providers issue for a canonical feature
FEATURE_ALIASES: dict[str, Feature] = {
    "ai_flashcard_generation_feature": Feature.AI_FLASHCARD_GENERATION,
}


def canonical_feature(name: str) -> str:
    return FEATURE_ALIASES.get(name, name)
