"""Pydantic schemas for Card API request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.card import Card as CardEntity
from flashdeck.infrastructure.common.schemas import Int32, parse_timestamp


class CardBase(BaseModel):
    """Base schema for Card."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Int32 = Field(..., description="Owning user id")
    deck_id: Int32 = Field(..., description="Deck the card belongs to")
    from_: str = Field(..., alias="from", description="Phrase in the source language")
    to: str = Field(..., description="Phrase in the target language")
    example: str = Field(..., description="Example sentence")
    audio_url: str = Field(..., description="Pronunciation audio URL")
    seen_at: datetime = Field(..., description="When the card was last reviewed")
    seen_for: Int32 = Field(..., description="Milliseconds spent on the last review")
    rating: Int32 = Field(..., description="Outcome of the last review")
    prev_rating: Int32 = Field(..., description="Outcome of the review before that")
    related: list[Int32] = Field(..., description="Ids of related cards, in order")


class CardCreate(CardBase):
    """Schema for creating a card. Every field is required."""

    @field_validator("seen_at", mode="before")
    @classmethod
    def validate_seen_at(cls, value: Any) -> datetime:
        return parse_timestamp(value)

    def to_domain(self) -> CardEntity:
        return CardEntity.create(
            user_id=UserId(self.user_id),
            deck_id=DeckId(self.deck_id),
            from_=self.from_,
            to=self.to,
            example=self.example,
            audio_url=self.audio_url,
            seen_at=self.seen_at,
            seen_for=self.seen_for,
            rating=self.rating,
            prev_rating=self.prev_rating,
            related=self.related,
        )


class Card(CardBase):
    """Schema for Card response."""

    id: int

    @classmethod
    def from_domain(cls, card: CardEntity) -> "Card":
        return cls(
            id=card.id.value,
            user_id=card.user_id.value,
            deck_id=card.deck_id.value,
            from_=card.from_,
            to=card.to,
            example=card.example,
            audio_url=card.audio_url,
            seen_at=card.seen_at,
            seen_for=card.seen_for,
            rating=card.rating,
            prev_rating=card.prev_rating,
            related=card.related,
        )
