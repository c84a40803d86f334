"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from flashdeck.config import configure_logging, load_settings
from flashdeck.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run from an empty directory so no stray .env file is read."""
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASE_URL", "DB_POOL_SIZE", "DB_MAX_OVERFLOW", "DB_POOL_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_database_url_required(self) -> None:
        with pytest.raises(ConfigurationError, match="DATABASE_URL"):
            load_settings()

    def test_blank_database_url_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "   ")

        with pytest.raises(ConfigurationError, match="must not be empty"):
            load_settings()

    def test_unparseable_database_url_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "definitely not a url")

        with pytest.raises(ConfigurationError, match="not a valid database URL"):
            load_settings()

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/flashdeck")

        settings = load_settings()

        assert settings.DATABASE_URL == "postgresql://u:p@localhost:5432/flashdeck"
        assert settings.PORT == 3000
        assert settings.DB_POOL_SIZE == 10
        assert settings.DB_MAX_OVERFLOW == 0
        assert settings.RUN_MIGRATIONS is True

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///./local.db\nPORT=8080\n")

        settings = load_settings()

        assert settings.DATABASE_URL == "sqlite:///./local.db"
        assert settings.PORT == 8080

    def test_unbounded_overflow_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("DB_MAX_OVERFLOW", "-1")

        with pytest.raises(ConfigurationError, match="DB_MAX_OVERFLOW"):
            load_settings()

    def test_zero_pool_timeout_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        monkeypatch.setenv("DB_POOL_TIMEOUT", "0")

        with pytest.raises(ConfigurationError, match="DB_POOL_TIMEOUT"):
            load_settings()


class TestConfigureLogging:
    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
            configure_logging("development", "chatty")
