"""Base types shared by every domain context."""

from .entity import Entity, EntityId
from .exceptions import DomainError, InvalidStudySessionError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "InvalidStudySessionError",
    "ValidationError",
    "ValueObject",
]
