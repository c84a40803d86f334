"""Tests for schema migrations."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine

from flashdeck.exceptions import MigrationError
from flashdeck.migrations import current_revision, head_revision, run_migrations


@pytest.fixture
def engine(tmp_path: Path) -> Generator[Engine, None, None]:
    engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


class TestRunMigrations:
    """Test suite for run_migrations."""

    def test_creates_schema_on_empty_database(self, engine: Engine) -> None:
        assert current_revision(engine) is None

        revision = run_migrations(engine)

        assert revision == head_revision()
        inspector = inspect(engine)
        assert {"users", "decks", "cards", "alembic_version"} <= set(inspector.get_table_names())
        card_columns = {column["name"] for column in inspector.get_columns("cards")}
        assert card_columns == {
            "id",
            "user_id",
            "deck_id",
            "from",
            "to",
            "example",
            "audio_url",
            "seen_at",
            "seen_for",
            "rating",
            "prev_rating",
            "related",
        }

    def test_no_nullable_columns(self, engine: Engine) -> None:
        run_migrations(engine)

        inspector = inspect(engine)
        for table in ("users", "decks", "cards"):
            for column in inspector.get_columns(table):
                assert column["nullable"] is False, f"{table}.{column['name']} is nullable"

    def test_rerun_is_noop(self, engine: Engine) -> None:
        first = run_migrations(engine)
        second = run_migrations(engine)

        assert first == second == head_revision()

    def test_failure_raises_migration_error(self, tmp_path: Path) -> None:
        """An unreachable database aborts with MigrationError."""
        broken = create_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}")

        with pytest.raises(MigrationError, match="Schema migration failed"):
            run_migrations(broken)
