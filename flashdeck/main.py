"""Application factory, startup lifecycle and error mapping."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashdeck import __version__, database
from flashdeck.config import configure_logging, get_settings
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.common.exceptions import ValidationError as DomainValidationError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.identity.routers import users
from flashdeck.infrastructure.learning.routers import cards, decks
from flashdeck.migrations import run_migrations

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure, open the pool and migrate before serving; dispose on shutdown.

    Any failure here (ConfigurationError, MigrationError) propagates and the
    server never starts accepting requests.
    """
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    engine = database.initialize_database(settings)
    try:
        if settings.RUN_MIGRATIONS:
            run_migrations(engine)
        logger.info("startup_complete", environment=settings.ENVIRONMENT)
        yield
    finally:
        database.dispose_engine()
        logger.info("shutdown_complete")


def format_validation_errors(exc: RequestValidationError) -> str:
    """One line per problem, e.g. ``body.email: Field required``."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        lines.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Map error kinds to status codes. Bodies are the plain-text description."""

    @app.exception_handler(FlashdeckError)
    async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> PlainTextResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "request_failed",
                path=request.url.path,
                method=request.method,
                error=exc.message,
                error_type=type(exc).__name__,
            )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> PlainTextResponse:
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if isinstance(exc, DomainValidationError)
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return PlainTextResponse(exc.message, status_code=status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        return PlainTextResponse(
            format_validation_errors(exc), status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers and error handlers."""
    app = FastAPI(
        title="flashdeck API",
        description="Users, decks and flashcards for language learning",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(users.router)
    app.include_router(decks.router)
    app.include_router(cards.router)
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "flashdeck.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="debug" if settings.ENVIRONMENT == "development" else "info",
    )


if __name__ == "__main__":
    run()
