"""Health and usage routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

USAGE = """# GitLab Honeycomb Buildevents Webhooks Sink

GET /healthz: healthcheck

POST /api/message: receive GitLab pipeline and job notifications
    (X-Gitlab-Event: Pipeline Hook | Job Hook)
"""


def create_health_router() -> APIRouter:
    """Create health router."""
    router = APIRouter(tags=["health"])

    @router.get("/", response_class=PlainTextResponse)
    async def home() -> str:
        """Describe the available endpoints."""
        return USAGE

    @router.get("/healthz", response_class=PlainTextResponse)
    async def healthz() -> str:
        """Liveness probe."""
        return "OK"

    return router
