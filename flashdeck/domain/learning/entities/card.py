"""
Card entity for language-learning review.

Review fields (`seen_at`, `seen_for`, `rating`, `prev_rating`) are supplied by
the client as-is. Nothing here schedules or scores reviews.
"""

from dataclasses import dataclass, field
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.timestamps import to_naive_utc
from flashdeck.domain.common.value_objects.ids import CardId, DeckId, UserId


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    Flashcard translating a phrase between the deck's languages.

    Business Rules:
    - `seen_for` is the viewing time in milliseconds
    - `related` is an ordered list of other card ids, kept as given and never
      checked against the cards table
    """

    id: CardId
    user_id: UserId
    deck_id: DeckId
    from_: str
    to: str
    example: str
    audio_url: str
    seen_at: datetime
    seen_for: int
    rating: int
    prev_rating: int
    related: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.seen_at = to_naive_utc(self.seen_at)
        self.related = list(self.related)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        deck_id: DeckId,
        from_: str,
        to: str,
        example: str,
        audio_url: str,
        seen_at: datetime,
        seen_for: int,
        rating: int,
        prev_rating: int,
        related: list[int],
    ) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(
            id=CardId.generate(),
            user_id=user_id,
            deck_id=deck_id,
            from_=from_,
            to=to,
            example=example,
            audio_url=audio_url,
            seen_at=seen_at,
            seen_for=seen_for,
            rating=rating,
            prev_rating=prev_rating,
            related=related,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        user_id: UserId,
        deck_id: DeckId,
        from_: str,
        to: str,
        example: str,
        audio_url: str,
        seen_at: datetime,
        seen_for: int,
        rating: int,
        prev_rating: int,
        related: list[int],
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            deck_id=deck_id,
            from_=from_,
            to=to,
            example=example,
            audio_url=audio_url,
            seen_at=seen_at,
            seen_for=seen_for,
            rating=rating,
            prev_rating=prev_rating,
            related=related,
        )
