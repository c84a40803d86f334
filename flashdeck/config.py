"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from flashdeck.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (required, no default)
    DATABASE_URL: str

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str | None = None

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: float = 30.0
    DB_POOL_RECYCLE: int = 3600
    DB_STATEMENT_TIMEOUT_MS: int = 30000

    # Schema
    RUN_MIGRATIONS: bool = True

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """Reject blank or unparseable connection strings."""
        value = value.strip()
        if not value:
            msg = "DATABASE_URL must not be empty"
            raise ValueError(msg)
        try:
            make_url(value)
        except ArgumentError as e:
            msg = f"DATABASE_URL is not a valid database URL: {e}"
            raise ValueError(msg) from e
        return value

    @field_validator("DB_POOL_SIZE", "DB_POOL_TIMEOUT", mode="after")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Pool size and checkout timeout must be positive."""
        if value <= 0:
            msg = "must be positive"
            raise ValueError(msg)
        return value

    @field_validator("DB_MAX_OVERFLOW", mode="after")
    @classmethod
    def validate_overflow(cls, value: int) -> int:
        """Overflow is bounded; -1 (unlimited) is not accepted."""
        if value < 0:
            msg = "DB_MAX_OVERFLOW must be zero or positive"
            raise ValueError(msg)
        return value


def load_settings() -> Settings:
    """Build settings from the environment, raising ConfigurationError on failure."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    if level is not None:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ConfigurationError(f"Unknown LOG_LEVEL '{level}'")
    else:
        log_level = logging.DEBUG if environment == "development" else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
