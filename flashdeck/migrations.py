"""Apply Alembic migrations shipped with the package."""

from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Connection, Engine

from flashdeck.exceptions import MigrationError

logger = structlog.get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "alembic"


def build_alembic_config(connection: Connection | None = None) -> Config:
    """Alembic config pointing at the packaged scripts.

    When a connection is given, env.py runs migrations on it instead of
    opening its own engine.
    """
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def head_revision() -> str | None:
    """Latest revision known to the packaged scripts."""
    return ScriptDirectory.from_config(build_alembic_config()).get_current_head()


def current_revision(engine: Engine) -> str | None:
    """Revision recorded in the database, None for an empty schema."""
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def run_migrations(engine: Engine) -> str | None:
    """
    Bring the schema up to the latest revision.

    Already-applied revisions are skipped, so calling this on an up-to-date
    database is a no-op.

    Args:
        engine: Engine for the target database

    Returns:
        The revision the database is at afterwards

    Raises:
        MigrationError: If any revision fails to apply
    """
    try:
        before = current_revision(engine)
        with engine.begin() as connection:
            command.upgrade(build_alembic_config(connection), "head")
        after = current_revision(engine)
    except Exception as e:
        logger.error("migrations_failed", error=str(e), exc_info=True)
        raise MigrationError(f"Schema migration failed: {e}") from e

    if before == after:
        logger.info("schema_up_to_date", revision=after)
    else:
        logger.info("schema_migrated", from_revision=before, to_revision=after)
    return after
