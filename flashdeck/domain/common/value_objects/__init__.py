from .ids import CardId, DeckId, UserId

__all__ = ["CardId", "DeckId", "UserId"]
