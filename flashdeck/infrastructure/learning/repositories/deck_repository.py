"""Repository for Deck domain entities."""

import logging

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from flashdeck.database import storage_errors
from flashdeck.domain.common.value_objects.ids import DeckId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.infrastructure.learning.mappers.deck_mapper import DeckMapper
from flashdeck.models import Deck as DeckORM

logger = logging.getLogger(__name__)


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_all(self) -> list[Deck]:
        """Get every deck in storage order."""
        with storage_errors(self.db):
            orm_models = self.db.execute(select(DeckORM)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, deck_id: DeckId) -> Deck | None:
        """Find a deck by ID, None if absent."""
        stmt = select(DeckORM).where(DeckORM.id == deck_id.value)
        with storage_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, deck: Deck) -> Deck:
        """Insert a new deck and return it with its generated id."""
        with storage_errors(self.db):
            orm_model = self.db.scalars(
                insert(DeckORM).returning(DeckORM), [self.mapper.to_values(deck)]
            ).one()
            # Map before commit: committing expires the row and would trigger a reload
            saved = self.mapper.to_domain(orm_model)
            self.db.commit()
        logger.info(f"Created deck {saved.id} for user {deck.user_id}")
        return saved
