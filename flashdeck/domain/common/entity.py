"""
Base class for Entities.

Entities have an identity assigned by storage. Two entities are equal if
they have the same identity, regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject

# Storage columns are 32-bit signed integers
MAX_ID = 2**31 - 1


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Zero is the placeholder for an entity the database has not stored yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0 or self.value > MAX_ID:
            raise ValidationError(
                f"{self.__class__.__name__} must be between 0 and {MAX_ID}",
                field="id",
                value=self.value,
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The database assigns the real one."""
        return cls(0)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.id.is_persisted:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
