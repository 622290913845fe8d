"""SortView API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SortViewError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Universe and view state initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Handlers are async and never await mid-operation: each request runs to
      completion on the event loop before the next begins
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sortview.api.error_handlers import register_error_handlers
from sortview.api.routes import health, items, ordering, selection
from sortview.config import get_settings
from sortview.infrastructure.observability import setup_logging
from sortview.infrastructure.view_state import init_view_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_view_state(
        settings.universe_size,
        filter_cache_size=settings.filter_cache_size,
        default_page_limit=settings.default_page_limit,
        initial_page_limit=settings.initial_page_limit,
    )
    logger.info("SortView API started")
    yield
    logger.info("SortView API shutting down")


app = FastAPI(
    title="SortView API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(items.router)
app.include_router(ordering.router)
app.include_router(selection.router)

register_error_handlers(app)
