"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from council.config import Settings
from council.interface.api.errors import register_error_handlers
from council.interface.api.routes import health, posts, proposals
from council.util.di.container import create_container, setup_di
from council.util.error import ConfigurationError
from council.util.observability import instrument_fastapi

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use; defaults to the production container

    Returns:
        Configured application

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="Council API",
        description="Backend API for Council - proposal voting and a community feed",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(proposals.router)
    app_instance.include_router(posts.router)

    return app_instance
