"""Repository for User domain entities."""

import logging

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from flashdeck.database import storage_errors
from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User
from flashdeck.infrastructure.identity.mappers.user_mapper import UserMapper
from flashdeck.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_all(self) -> list[User]:
        """
        Get every user in storage order.

        Returns:
            List of user entities, unpaginated
        """
        with storage_errors(self.db):
            orm_models = self.db.execute(select(UserORM)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        with storage_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The unsaved user entity

        Returns:
            Stored user entity carrying the database-generated id
        """
        with storage_errors(self.db):
            orm_model = self.db.scalars(
                insert(UserORM).returning(UserORM), [self.mapper.to_values(user)]
            ).one()
            # Map before commit: committing expires the row and would trigger a reload
            saved = self.mapper.to_domain(orm_model)
            self.db.commit()
        logger.info(f"Created user {saved.id}")
        return saved
