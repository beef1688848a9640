"""FastAPI application for the lift-insights JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db.engine import get_db_path, init_db
from .routers import analytics, clients, training_logs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    db_path = get_db_path()
    if not db_path.exists():
        logger.info("No database found, creating %s", db_path)
        await init_db(db_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="lift-insights",
        description="Training log analytics: muscle recovery and personal records",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(clients.router)
    app.include_router(training_logs.router)
    app.include_router(analytics.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
