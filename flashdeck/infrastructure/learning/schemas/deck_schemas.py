"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.learning.entities.deck import Deck as DeckEntity
from flashdeck.infrastructure.common.schemas import Int32, parse_timestamp


class DeckBase(BaseModel):
    """Base schema for Deck.

    `from` is a Python keyword, so the attribute is `from_` and the wire name
    is set through its alias.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Int32 = Field(..., description="Owning user id")
    from_: str = Field(..., alias="from", description="Source language")
    to: str = Field(..., description="Target language")
    seen_at: datetime = Field(..., description="When the deck was last studied")


class DeckCreate(DeckBase):
    """Schema for creating a deck."""

    @field_validator("seen_at", mode="before")
    @classmethod
    def validate_seen_at(cls, value: Any) -> datetime:
        return parse_timestamp(value)

    def to_domain(self) -> DeckEntity:
        return DeckEntity.create(
            user_id=UserId(self.user_id),
            from_=self.from_,
            to=self.to,
            seen_at=self.seen_at,
        )


class Deck(DeckBase):
    """Schema for Deck response."""

    id: int

    @classmethod
    def from_domain(cls, deck: DeckEntity) -> "Deck":
        return cls(
            id=deck.id.value,
            user_id=deck.user_id.value,
            from_=deck.from_,
            to=deck.to,
            seen_at=deck.seen_at,
        )
