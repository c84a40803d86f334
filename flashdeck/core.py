"""Dependency injection container wiring repositories to the request session."""

from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.infrastructure.identity.repositories.user_repository import UserRepository
from flashdeck.infrastructure.learning.repositories.card_repository import CardRepository
from flashdeck.infrastructure.learning.repositories.deck_repository import DeckRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    deck_repository = providers.Factory(DeckRepository, db=db)
    card_repository = providers.Factory(CardRepository, db=db)


container = Container()
