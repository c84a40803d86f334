"""API routes for users."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import UserId
from flashdeck.exceptions import FlashdeckError, UserNotFoundError
from flashdeck.infrastructure.common.di import inject_repository
from flashdeck.infrastructure.identity.repositories.user_repository import UserRepository
from flashdeck.infrastructure.identity.schemas import User, UserCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[User], status_code=status.HTTP_200_OK)
def list_users(
    repository: UserRepository = Depends(inject_repository(container.user_repository)),
) -> list[User]:
    """List every user."""
    try:
        return [User.from_domain(user) for user in repository.find_all()]
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list users: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.get("/{user_id}", response_model=User, status_code=status.HTTP_200_OK)
def get_user(
    user_id: int,
    repository: UserRepository = Depends(inject_repository(container.user_repository)),
) -> User:
    """
    Get one user by id.

    Raises:
        UserNotFoundError: If no user has this id (404)
    """
    try:
        user = repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return User.from_domain(user)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get user {user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.post("", response_model=User, status_code=status.HTTP_200_OK)
def create_user(
    request: UserCreate,
    repository: UserRepository = Depends(inject_repository(container.user_repository)),
) -> User:
    """
    Create a user from a complete record.

    Returns the stored user, including the id assigned by the database.
    """
    try:
        return User.from_domain(repository.add(request.to_domain()))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e
