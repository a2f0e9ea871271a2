"""
Deck entity: a named, user-owned collection of cards.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, UserId

# Domain constraints
MAX_DECK_NAME_LENGTH = 255
MAX_DECK_DESCRIPTION_LENGTH = 1000


def validate_deck_name(name: str) -> str:
    """Trim a deck name and check it is present and short enough."""
    if not name or not name.strip():
        raise ValidationError("Name is required", field="name")
    name = name.strip()
    if len(name) > MAX_DECK_NAME_LENGTH:
        raise ValidationError(
            f"Name must be at most {MAX_DECK_NAME_LENGTH} characters", field="name"
        )
    return name


def validate_deck_description(description: str | None) -> str | None:
    """Trim a description; blank descriptions become None."""
    if description is None:
        return None
    description = description.strip()
    if len(description) > MAX_DECK_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description must be at most {MAX_DECK_DESCRIPTION_LENGTH} characters",
            field="description",
        )
    return description or None


@dataclass
class Deck(Entity[DeckId]):
    """
    Deck owned by a single user.

    Business Rules:
    - Name cannot be empty after trimming and is at most 255 characters
    - Description is optional and at most 1000 characters
    - Only name and description can change after creation
    - Deleting a deck deletes all of its cards
    """

    id: DeckId
    user_id: UserId
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required", field="name")

    def update_details(self, name: str, description: str | None) -> None:
        """
        Replace the deck's name and description.

        Args:
            name: New deck name
            description: New description, or None to clear it

        Raises:
            ValidationError: If name is empty or either field is too long
        """
        name = validate_deck_name(name)
        description = validate_deck_description(description)
        self.name, self.description = name, description

    @classmethod
    def create(cls, user_id: UserId, name: str, description: str | None = None) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(
            id=DeckId.generate(),
            user_id=user_id,
            name=validate_deck_name(name),
            description=validate_deck_description(description),
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        user_id: UserId,
        name: str,
        description: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
