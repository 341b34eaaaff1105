"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lostfound.config import Settings
from lostfound.interface.api.errors import register_error_handlers
from lostfound.interface.api.routes import comments, health
from lostfound.util.di.container import create_container, setup_di
from lostfound.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending.

    Args:
        container: DI container to serve requests from; the production
            container is built when omitted
        settings: Application settings; loaded from the environment when omitted

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Lost & Found Comments API",
        description="Threaded comments, mentions and likes on lost & found items",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance
