"""
Card entity: one front/back study unit.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import CardId, DeckId

# Domain constraints
MAX_CARD_SIDE_LENGTH = 1000


def validate_card_side(text: str, side: str) -> str:
    """Trim one side of a card and check it is present and short enough."""
    if not text or not text.strip():
        raise ValidationError(f"{side.capitalize()} side is required", field=side)
    text = text.strip()
    if len(text) > MAX_CARD_SIDE_LENGTH:
        raise ValidationError(
            f"{side.capitalize()} side must be at most {MAX_CARD_SIDE_LENGTH} characters",
            field=side,
        )
    return text


@dataclass
class Card(Entity[CardId]):
    """
    Card belonging to exactly one deck.

    Business Rules:
    - Front and back cannot be empty and are at most 1000 characters
    - A card has no owner of its own: it is owned through its deck
    """

    id: CardId
    deck_id: DeckId
    front: str
    back: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise ValidationError("Front side is required", field="front")
        if not self.back or not self.back.strip():
            raise ValidationError("Back side is required", field="back")

    def update_content(self, front: str, back: str) -> None:
        """
        Replace both sides of the card.

        Raises:
            ValidationError: If either side is empty or too long
        """
        front = validate_card_side(front, "front")
        back = validate_card_side(back, "back")
        self.front, self.back = front, back

    @classmethod
    def create(cls, deck_id: DeckId, front: str, back: str) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(
            id=CardId.generate(),
            deck_id=deck_id,
            front=validate_card_side(front, "front"),
            back=validate_card_side(back, "back"),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        deck_id: DeckId,
        front: str,
        back: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            front=front,
            back=back,
            created_at=created_at,
            updated_at=updated_at,
        )
