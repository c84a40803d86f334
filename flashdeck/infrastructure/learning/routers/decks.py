"""API routes for decks."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import DeckId
from flashdeck.exceptions import DeckNotFoundError, FlashdeckError
from flashdeck.infrastructure.common.di import inject_repository
from flashdeck.infrastructure.learning.repositories.deck_repository import DeckRepository
from flashdeck.infrastructure.learning.schemas import Deck, DeckCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("", response_model=list[Deck], status_code=status.HTTP_200_OK)
def list_decks(
    repository: DeckRepository = Depends(inject_repository(container.deck_repository)),
) -> list[Deck]:
    """List every deck."""
    try:
        return [Deck.from_domain(deck) for deck in repository.find_all()]
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.get("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: int,
    repository: DeckRepository = Depends(inject_repository(container.deck_repository)),
) -> Deck:
    """Get one deck by id, 404 if absent."""
    try:
        deck = repository.find_by_id(DeckId(deck_id))
        if deck is None:
            raise DeckNotFoundError(deck_id)
        return Deck.from_domain(deck)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.post("", response_model=Deck, status_code=status.HTTP_200_OK)
def create_deck(
    request: DeckCreate,
    repository: DeckRepository = Depends(inject_repository(container.deck_repository)),
) -> Deck:
    """Create a deck for a user."""
    try:
        return Deck.from_domain(repository.add(request.to_domain()))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e
