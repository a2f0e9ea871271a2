from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject

MAX_USER_ID_LENGTH = 255


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""

    value: int


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""

    value: int


@dataclass(frozen=True)
class UserId(ValueObject):
    """
    Identifier of a user as issued by the external identity provider.

    The value is opaque: it is only ever compared for equality.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")
        if len(self.value) > MAX_USER_ID_LENGTH:
            raise ValueError(f"UserId cannot exceed {MAX_USER_ID_LENGTH} characters")

    def __str__(self) -> str:
        return self.value
