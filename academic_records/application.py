"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from academic_records.api import create_api_router
from academic_records.config import settings
from academic_records.utils.db import close_db, init_db
from academic_records.utils.exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    await init_db()
    yield
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.API_TITLE,
        description="Academic records service validating changes before persistence",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(create_api_router())

    return app
