"""Custom exception hierarchy for the flashdeck service."""


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(FlashdeckError):
    """Missing or invalid configuration. Fatal at startup."""


class MigrationError(FlashdeckError):
    """Schema migration failed. Fatal at startup."""


class PoolError(FlashdeckError):
    """No pooled connection could be obtained."""


class StorageError(FlashdeckError):
    """The database rejected or failed a statement."""


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class DeckNotFoundError(NotFoundError):
    """Deck not found error."""

    def __init__(self, deck_id: int) -> None:
        self.deck_id = deck_id
        super().__init__(f"Deck with id {deck_id} not found")


class CardNotFoundError(NotFoundError):
    """Card not found error."""

    def __init__(self, card_id: int) -> None:
        self.card_id = card_id
        super().__init__(f"Card with id {card_id} not found")
