"""Repository for Deck domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.infrastructure.learning.mappers.deck_mapper import DeckMapper
from flashdeck.models import Card as CardORM
from flashdeck.models import Deck as DeckORM


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_by_id_for_owner(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner_with_card_counts(self, user_id: UserId) -> list[tuple[Deck, int]]:
        """
        Get all decks of a user with the number of cards in each.

        Returns:
            List of (deck, card_count) ordered by updated_at DESC
        """
        card_count = (
            select(CardORM.deck_id, func.count(CardORM.id).label("card_count"))
            .group_by(CardORM.deck_id)
            .subquery()
        )
        stmt = (
            select(DeckORM, func.coalesce(card_count.c.card_count, 0))
            .outerjoin(card_count, card_count.c.deck_id == DeckORM.id)
            .where(DeckORM.user_id == user_id.value)
            .order_by(DeckORM.updated_at.desc(), DeckORM.id.desc())
        )
        rows = self.db.execute(stmt).all()
        return [(self.mapper.to_domain(orm), int(count)) for orm, count in rows]

    def count_by_owner(self, user_id: UserId) -> int:
        """Count decks owned by a user."""
        stmt = select(func.count(DeckORM.id)).where(DeckORM.user_id == user_id.value)
        return self.db.execute(stmt).scalar() or 0

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Args:
            deck: The deck entity to save

        Returns:
            Saved deck entity with database-generated values
        """
        if not deck.id.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(DeckORM, deck.id.value)
        if not orm_model:
            raise ValueError(f"Deck {deck.id.value} not found")
        self.mapper.to_orm(deck, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck and its cards.

        The database cascades the delete to cards through the foreign key.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return bool(result.rowcount)
