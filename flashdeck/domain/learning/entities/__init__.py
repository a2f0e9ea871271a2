from .card import MAX_CARD_SIDE_LENGTH, Card, validate_card_side
from .deck import (
    MAX_DECK_DESCRIPTION_LENGTH,
    MAX_DECK_NAME_LENGTH,
    Deck,
    validate_deck_description,
    validate_deck_name,
)

__all__ = [
    "MAX_CARD_SIDE_LENGTH",
    "MAX_DECK_DESCRIPTION_LENGTH",
    "MAX_DECK_NAME_LENGTH",
    "Card",
    "Deck",
    "validate_card_side",
    "validate_deck_description",
    "validate_deck_name",
]
