"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static assets under /public, landing page at /
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import health, landing, users
from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.database import close_db, init_db
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Exercise Tracker API started")
    yield
    logger.info("Exercise Tracker API shutting down")
    await close_db()


app = FastAPI(
    title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(landing.router)
app.include_router(health.router)
app.include_router(users.router)

app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

register_error_handlers(app)
