"""Pydantic schemas for User API request/response validation."""

from pydantic import BaseModel, Field

from flashdeck.domain.identity.entities.user import User as UserEntity


class UserBase(BaseModel):
    """Base schema for User."""

    name: str = Field(..., description="Display name")
    first: str = Field(..., description="First name")
    last: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address")


class UserCreate(UserBase):
    """Schema for creating a user."""

    def to_domain(self) -> UserEntity:
        return UserEntity.create(
            name=self.name, first=self.first, last=self.last, email=self.email
        )


class User(UserBase):
    """Schema for User response."""

    id: int

    @classmethod
    def from_domain(cls, user: UserEntity) -> "User":
        return cls(
            id=user.id.value,
            name=user.name,
            first=user.first,
            last=user.last,
            email=user.email,
        )
