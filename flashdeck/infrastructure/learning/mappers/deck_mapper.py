"""Mapper for Deck ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            name=orm_model.name,
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Owner never changes after creation
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            return orm_model

        return DeckORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            user_id=domain_entity.user_id.value,
            name=domain_entity.name,
            description=domain_entity.description,
        )
