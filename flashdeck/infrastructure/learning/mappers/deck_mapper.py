"""Mapper for Deck ORM ↔ Domain conversion."""

from typing import Any

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
            from_=orm_model.from_,
            to=orm_model.to,
            seen_at=orm_model.seen_at,
        )

    def to_values(self, domain_entity: Deck) -> dict[str, Any]:
        """Column values for inserting the entity; the id is left to the database."""
        return {
            "user_id": domain_entity.user_id.value,
            "from_": domain_entity.from_,
            "to": domain_entity.to,
            "seen_at": domain_entity.seen_at,
        }
