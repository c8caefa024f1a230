"""Insurance Advisor API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AdvisorError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager created once in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Table creation failure does not abort startup; readiness probe reports it
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from insurance_advisor.api.error_handlers import register_error_handlers
from insurance_advisor.api.routes import health, recommendation, recommendation_history
from insurance_advisor.config import get_settings
from insurance_advisor.infrastructure.database import DatabaseSessionManager
from insurance_advisor.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info("Insurance Advisor API started")
    yield
    logger.info("Insurance Advisor API shutting down")
    await db_manager.close()


app = FastAPI(
    title="Insurance Advisor API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(recommendation.router)
app.include_router(recommendation_history.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API with uvicorn on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
