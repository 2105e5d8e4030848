"""Notes API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NotesError → {"error", "code", "details"} responses
    - CORS configured from settings (not hardcoded)
    - APP_STARTED recorded in the action log on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Service resolved through get_notes_service so tests can override it
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notes_app.api.dependencies import get_notes_service
from notes_app.api.error_handlers import register_error_handlers
from notes_app.api.routes import action_logs, health, notes
from notes_app.config import get_settings
from notes_app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    service = app.dependency_overrides.get(get_notes_service, get_notes_service)()
    service.record_app_started(
        {"port": settings.port, "environment": settings.app_env},
    )
    logger.info(f"Notes API started ({settings.app_env})")
    yield
    logger.info("Notes API shutting down")


app = FastAPI(title="Notes API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(notes.router)
app.include_router(action_logs.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "notes_app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
