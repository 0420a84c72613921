"""FocusTools API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error", "message"} JSON
    - CORS configured from settings (not hardcoded)
    - Database manager created on startup, stored on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store handle lives on app.state and reaches routes through dependencies
      (no module-level connection object)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from focustools.api.error_handlers import register_error_handlers
from focustools.api.routes import health, sessions, tasks
from focustools.infrastructure.database import DatabaseSessionManager
from focustools.infrastructure.observability import setup_logging
from focustools.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("FocusTools API started")
    yield
    logger.info("FocusTools API shutting down")
    await app.state.db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="FocusTools API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tasks.router)
app.include_router(sessions.router)

register_error_handlers(app)
