"""Database models."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from flashdeck.database import Base

# INTEGER[] on PostgreSQL, a JSON array on SQLite
IntegerList = ARRAY(Integer).with_variant(JSON(), "sqlite")


class User(Base):
    """User model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    first: Mapped[str] = mapped_column(Text, nullable=False)
    last: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, name='{self.name}')>"


class Deck(Base):
    """Deck model: a language pair a user studies."""

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    from_: Mapped[str] = mapped_column("from", Text, nullable=False)
    to: Mapped[str] = mapped_column(Text, nullable=False)
    seen_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    def __repr__(self) -> str:
        """String representation of Deck."""
        return f"<Deck(id={self.id}, from='{self.from_}', to='{self.to}')>"


class Card(Base):
    """Card model with review fields."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    deck_id: Mapped[int] = mapped_column(ForeignKey("decks.id"), nullable=False, index=True)
    from_: Mapped[str] = mapped_column("from", Text, nullable=False)
    to: Mapped[str] = mapped_column(Text, nullable=False)
    example: Mapped[str] = mapped_column(Text, nullable=False)
    audio_url: Mapped[str] = mapped_column(Text, nullable=False)
    seen_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    seen_for: Mapped[int] = mapped_column(Integer, nullable=False)  # ms
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    prev_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    related: Mapped[list[int]] = mapped_column(IntegerList, nullable=False)

    def __repr__(self) -> str:
        """String representation of Card."""
        return f"<Card(id={self.id}, deck_id={self.deck_id}, from='{self.from_}')>"
