"""Repository for Card domain entities."""

import logging

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from flashdeck.database import storage_errors
from flashdeck.domain.common.value_objects.ids import CardId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.infrastructure.learning.mappers.card_mapper import CardMapper
from flashdeck.models import Card as CardORM

logger = logging.getLogger(__name__)


class CardRepository:
    """Repository for Card domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()

    def find_all(self) -> list[Card]:
        """
        Get every card in storage order.

        Returns:
            List of card entities, unpaginated
        """
        with storage_errors(self.db):
            orm_models = self.db.execute(select(CardORM)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, card_id: CardId) -> Card | None:
        """
        Find a card by ID.

        Args:
            card_id: The card ID

        Returns:
            Card entity if found, None otherwise
        """
        stmt = select(CardORM).where(CardORM.id == card_id.value)
        with storage_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, card: Card) -> Card:
        """
        Insert a new card.

        The row comes back from INSERT ... RETURNING, so no second read is
        issued.

        Args:
            card: The unsaved card entity

        Returns:
            Stored card entity carrying the database-generated id
        """
        with storage_errors(self.db):
            orm_model = self.db.scalars(
                insert(CardORM).returning(CardORM), [self.mapper.to_values(card)]
            ).one()
            # Map before commit: committing expires the row and would trigger a reload
            saved = self.mapper.to_domain(orm_model)
            self.db.commit()
        logger.info(f"Created card {saved.id} in deck {card.deck_id}")
        return saved
