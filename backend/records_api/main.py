"""FastAPI application factory and server entry point."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import uvicorn
from fastapi import FastAPI

from records_api.config import get_settings
from records_api.infrastructure.database import Database
from records_api.infrastructure.logging.log_config import setup_logging
from records_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the connection pool, close it on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    database: Database | None = None
    try:
        database = Database(
            settings.db_url,
            pool_size=settings.db_pool_size,
            echo=False,
        )
        await database.connect()
    except Exception:
        logger.critical("Database unreachable at startup — shutting down", exc_info=True)
        if database is not None:
            await database.dispose()
        raise

    app.state.database = database
    try:
        yield
    finally:
        await database.dispose()
        logger.info("Connection pool closed")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the API on ADDR until the process is terminated."""
    settings = get_settings()
    setup_logging(settings)
    logger.info("Listening on %s:%d", settings.listen_host, settings.listen_port)
    uvicorn.run(
        app,
        host=settings.listen_host,
        port=settings.listen_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
