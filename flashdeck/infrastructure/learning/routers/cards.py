"""API routes for cards."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.value_objects import CardId
from flashdeck.exceptions import CardNotFoundError, FlashdeckError
from flashdeck.infrastructure.common.di import inject_repository
from flashdeck.infrastructure.learning.repositories.card_repository import CardRepository
from flashdeck.infrastructure.learning.schemas import Card, CardCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=list[Card], status_code=status.HTTP_200_OK)
def list_cards(
    repository: CardRepository = Depends(inject_repository(container.card_repository)),
) -> list[Card]:
    """List every card across all decks."""
    try:
        return [Card.from_domain(card) for card in repository.find_all()]
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list cards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.get("/{card_id}", response_model=Card, status_code=status.HTTP_200_OK)
def get_card(
    card_id: int,
    repository: CardRepository = Depends(inject_repository(container.card_repository)),
) -> Card:
    """
    Get one card by id.

    Raises:
        CardNotFoundError: If no card has this id (404)
    """
    try:
        card = repository.find_by_id(CardId(card_id))
        if card is None:
            raise CardNotFoundError(card_id)
        return Card.from_domain(card)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e


@router.post("", response_model=Card, status_code=status.HTTP_200_OK)
def create_card(
    request: CardCreate,
    repository: CardRepository = Depends(inject_repository(container.card_repository)),
) -> Card:
    """
    Create a card from a complete record.

    Review fields are stored exactly as sent; `related` keeps its order.
    """
    try:
        return Card.from_domain(repository.add(request.to_domain()))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create card: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        ) from e
