from .card_schemas import Card, CardBase, CardCreate
from .deck_schemas import Deck, DeckBase, DeckCreate

__all__ = ["Card", "CardBase", "CardCreate", "Deck", "DeckBase", "DeckCreate"]
