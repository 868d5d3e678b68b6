"""Deliberate API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DeliberateError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - ServiceContext built on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests and scripts can build isolated apps;
      module-level `app` is what uvicorn serves
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deliberate.api.error_handlers import register_error_handlers
from deliberate.api.routes import health, session_lifecycle, tool_calls
from deliberate.config import Settings, get_settings
from deliberate.infrastructure.observability import setup_logging
from deliberate.infrastructure.service_context import build_context

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    context = await build_context(settings)
    app.state.context = context
    if context.housekeeper is not None:
        context.housekeeper.start()
    logger.info("Deliberate API started")
    yield
    logger.info("Deliberate API shutting down")
    await context.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Deliberate API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(tool_calls.router)
    app.include_router(session_lifecycle.router)

    register_error_handlers(app)
    return app


app = create_app()
