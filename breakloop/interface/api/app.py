"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from breakloop.config import Settings
from breakloop.interface.api.routes import (
    conversations,
    events,
    friends,
    health,
    inbox,
    invites,
)
from breakloop.interface.error import register_error_handlers
from breakloop.util.di.container import create_container, setup_di
from breakloop.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Breakloop Social API",
        description="Invites, friend requests, the activity inbox and private conversations for Breakloop",
        version="0.1.0",
        debug=settings.debug,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.invites.base_url,
            "http://localhost:3000",  # Local development
            "http://localhost:8081",  # Expo web
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "X-User-Id", "X-User-Name"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(friends.router)
    app_instance.include_router(inbox.router)
    app_instance.include_router(conversations.router)
    app_instance.include_router(events.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
