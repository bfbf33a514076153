"""Donor Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery, ExMA anti-pattern)
    - Global error handlers map DonorRegistryError → {"error": message} responses
    - CORS configured from settings (defaults to every origin)
    - Connection pool created once in the lifespan, kept on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() reads HOST/PORT from settings so the process supervisor only sets env vars
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import health, registration

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
        pool_timeout=settings.database_pool_timeout,
        use_ssl=settings.database_ssl,
    )
    logger.info("Donor Registry API started")
    yield
    logger.info("Donor Registry API shutting down")
    await app.state.db_manager.close()


app = FastAPI(
    title="Donor Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(registration.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the API on HOST:PORT."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Server is running on port {settings.port}",
        extra={"port": settings.port},
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
