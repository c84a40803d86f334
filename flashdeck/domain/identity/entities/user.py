"""User entity."""

from dataclasses import dataclass

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.value_objects.ids import UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    A learner owning decks and cards.

    Every field is required; none is validated beyond its type.
    """

    id: UserId
    name: str
    first: str
    last: str
    email: str

    @classmethod
    def create(cls, name: str, first: str, last: str, email: str) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(id=UserId.generate(), name=name, first=first, last=last, email=email)

    @classmethod
    def create_with_id(
        cls, id: UserId, name: str, first: str, last: str, email: str
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(id=id, name=name, first=first, last=last, email=email)
