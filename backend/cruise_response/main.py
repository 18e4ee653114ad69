"""Cruise Control Response API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every exception to an error envelope
    - Settings snapshot and service identity resolved once, stored on app.state
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Factory over module-level app: tests build apps with their own Settings
    - No CORSMiddleware: CORS headers are part of every written response
      (core/domain_types.CorsPolicy), so they also reach error responses
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cruise_response.api.error_handlers import register_error_handlers
from cruise_response.api.routes import health
from cruise_response.config import Settings, get_settings
from cruise_response.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around one settings snapshot."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Cruise Control response API started "
            f"(version={settings.service_version}, commit={settings.commit_id})",
        )
        yield
        logger.info("Cruise Control response API shutting down")

    app = FastAPI(
        title="Cruise Control Response API",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.identity = settings.service_identity()

    # Routes: explicit registration
    app.include_router(health.router)

    register_error_handlers(app)
    return app
