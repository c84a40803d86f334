"""Deck entity: a language pair studied by one user."""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.timestamps import to_naive_utc
from flashdeck.domain.common.value_objects.ids import DeckId, UserId


@dataclass(eq=False)
class Deck(Entity[DeckId]):
    """
    Deck grouping cards for a language pair.

    `from_` and `to` name the source and target languages.
    """

    id: DeckId
    user_id: UserId
    from_: str
    to: str
    seen_at: datetime

    def __post_init__(self) -> None:
        self.seen_at = to_naive_utc(self.seen_at)

    @classmethod
    def create(cls, user_id: UserId, from_: str, to: str, seen_at: datetime) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(id=DeckId.generate(), user_id=user_id, from_=from_, to=to, seen_at=seen_at)

    @classmethod
    def create_with_id(
        cls, id: DeckId, user_id: UserId, from_: str, to: str, seen_at: datetime
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(id=id, user_id=user_id, from_=from_, to=to, seen_at=seen_at)
