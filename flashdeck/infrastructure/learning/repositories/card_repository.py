"""Repository for Card domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import CardId, DeckId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.infrastructure.learning.mappers.card_mapper import CardMapper
from flashdeck.models import Card as CardORM


class CardRepository:
    """
    Repository for Card domain entities.

    Queries are not scoped to a user: callers authorize the parent deck first.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()

    def find_by_id(self, card_id: CardId) -> Card | None:
        orm_model = self.db.get(CardORM, card_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_deck(self, deck_id: DeckId) -> list[Card]:
        """
        Get all cards of a deck.

        Returns:
            List of card entities ordered by created_at ASC
        """
        stmt = (
            select(CardORM)
            .where(CardORM.deck_id == deck_id.value)
            .order_by(CardORM.created_at.asc(), CardORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_deck(self, deck_id: DeckId) -> int:
        stmt = select(func.count(CardORM.id)).where(CardORM.deck_id == deck_id.value)
        return self.db.execute(stmt).scalar() or 0

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Each call commits on its own, so a batch of saves is not atomic.

        Returns:
            Saved card entity with database-generated values
        """
        if not card.id.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(card)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(CardORM, card.id.value)
        if not orm_model:
            raise ValueError(f"Card {card.id.value} not found")
        self.mapper.to_orm(card, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, card_id: CardId) -> bool:
        """
        Delete a card.

        Returns:
            True if deleted, False if not found
        """
        result = self.db.execute(delete(CardORM).where(CardORM.id == card_id.value))
        self.db.commit()
        return bool(result.rowcount)
