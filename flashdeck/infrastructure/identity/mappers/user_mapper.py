"""Mapper for User ORM ↔ Domain conversion."""

from typing import Any

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            first=orm_model.first,
            last=orm_model.last,
            email=orm_model.email,
        )

    def to_values(self, domain_entity: User) -> dict[str, Any]:
        """Column values for inserting the entity; the id is left to the database."""
        return {
            "name": domain_entity.name,
            "first": domain_entity.first,
            "last": domain_entity.last,
            "email": domain_entity.email,
        }
