"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from parking_api.core.config import Settings, settings
from parking_api.core.database import Database
from parking_api.core.errors import register_exception_handlers
from parking_api.helpers.migrations import run_migrations_in_subprocess
from parking_api.routers import bookings, health

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings, database: Optional[Database] = None) -> FastAPI:
    database = database or Database.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up...")
        if app_settings.RUN_MIGRATIONS_ON_STARTUP:
            logger.info("Run alembic upgrade head...")
            run_migrations_in_subprocess()
            logger.info("Finished alembic upgrade.")
        yield  # Control returns to the application during runtime
        await app.state.database.dispose()

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="API for booking shared parking spots",
        version=app_settings.VERSION,
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=app_settings.debug,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.database = database

    register_exception_handlers(app)

    # Include routers
    app.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])
    app.include_router(health.router, prefix="/health", tags=["HealthCheck"])
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("parking_api.main:app", host="0.0.0.0", port=8000, reload=True)
