"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..app import Application
from ..config import Settings
from ..transmission import ISender
from .routes import create_health_router, create_webhooks_router


def create_fastapi_app(settings: Settings, sender: ISender | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    The application instance is built here and handed to the routers, so
    every request sees the same immutable settings.
    """
    application = Application(settings, sender=sender)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        # Startup
        await application.start()
        yield
        # Shutdown
        await application.stop()

    fastapi_app = FastAPI(
        title="buildevents",
        description="GitLab CI webhooks to Honeycomb trace spans",
        version=__version__,
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    # Include routers
    fastapi_app.include_router(create_health_router())
    fastapi_app.include_router(create_webhooks_router(application))

    return fastapi_app
