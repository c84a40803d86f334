"""FastAPI dependencies built from container providers."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.database import DatabaseSession

T = TypeVar("T")


def inject_repository(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The repository is built around the request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        return provider(db=db)

    return dependency
