"""FastAPI application for the gymbuddy JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, configure_logging, get_settings
from ..data.exercise_loader import seed_exercises_if_empty
from ..db.engine import Store
from ..errors import NotFoundError, ValidationError
from .routers import exercises, routines, workouts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store (and seed the catalog) on startup, close on shutdown."""
    settings: Settings = app.state.settings
    store = Store(settings.db_path)
    await store.open()
    await seed_exercises_if_empty(store)
    app.state.store = store
    logger.info("gymbuddy API v%s ready", __version__)
    yield
    await store.close()


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="gymbuddy",
        description="Exercise library, routines, workout log and personal records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)

    prefix = settings.api_prefix.rstrip("/")
    app.include_router(exercises.router, prefix=prefix)
    app.include_router(routines.router, prefix=prefix)
    app.include_router(workouts.router, prefix=prefix)

    @app.get(f"{prefix}/health")
    async def health():
        """Health check endpoint."""
        return {"ok": True}

    return app
