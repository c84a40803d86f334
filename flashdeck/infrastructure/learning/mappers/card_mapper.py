"""Mapper for Card ORM ↔ Domain conversion."""

from typing import Any

from flashdeck.domain.common.value_objects import CardId, DeckId, UserId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.models import Card as CardORM


class CardMapper:
    """Mapper for Card ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CardORM) -> Card:
        """Convert ORM model to domain entity."""
        return Card.create_with_id(
            id=CardId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            deck_id=DeckId(orm_model.deck_id),
            from_=orm_model.from_,
            to=orm_model.to,
            example=orm_model.example,
            audio_url=orm_model.audio_url,
            seen_at=orm_model.seen_at,
            seen_for=orm_model.seen_for,
            rating=orm_model.rating,
            prev_rating=orm_model.prev_rating,
            related=list(orm_model.related or []),
        )

    def to_values(self, domain_entity: Card) -> dict[str, Any]:
        """Column values for inserting the entity; the id is left to the database."""
        return {
            "user_id": domain_entity.user_id.value,
            "deck_id": domain_entity.deck_id.value,
            "from_": domain_entity.from_,
            "to": domain_entity.to,
            "example": domain_entity.example,
            "audio_url": domain_entity.audio_url,
            "seen_at": domain_entity.seen_at,
            "seen_for": domain_entity.seen_for,
            "rating": domain_entity.rating,
            "prev_rating": domain_entity.prev_rating,
            "related": list(domain_entity.related),
        }
