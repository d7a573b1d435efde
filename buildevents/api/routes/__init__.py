"""API routes."""

from .health import create_health_router
from .webhooks import create_webhooks_router

__all__ = ["create_health_router", "create_webhooks_router"]
