"""
Identity-bearing domain objects.

An entity keeps its identity while its attributes change. Ids are assigned
by the database; until then an entity carries the placeholder id 0.

Example:
    @dataclass
    class Deck(Entity[DeckId]):
        id: DeckId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject

UNSAVED_ID = 0


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Integer id of one entity type; subclasses keep deck and card ids apart."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for an entity the database has not stored yet."""
        return cls(UNSAVED_ID)

    @property
    def is_persisted(self) -> bool:
        return self.value != UNSAVED_ID


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base for entities identified by an ``EntityId`` subclass.

    Subclasses declare ``id`` as their first dataclass field.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self)) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
