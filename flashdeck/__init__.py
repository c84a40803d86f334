"""flashdeck: HTTP CRUD service for language-learning users, decks and cards."""

__version__ = "0.1.0"
