"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static public/ directory mounted AFTER routes so /api/* and / take precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker import __version__
from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import exercise_log, health, pages, users
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import init_db
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_tables:
        await manager.create_all()
    logger.info(f"Exercise Tracker API started (port {settings.port})")
    yield
    await manager.dispose()
    logger.info("Exercise Tracker API shutting down")


app = FastAPI(
    title="Exercise Tracker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(exercise_log.router)

register_error_handlers(app)

if os.path.isdir(settings.public_dir):
    app.mount(
        "/", StaticFiles(directory=settings.public_dir), name="public",
    )
