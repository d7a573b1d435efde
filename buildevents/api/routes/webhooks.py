"""GitLab webhook route."""

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from ...app import EventKind, IApplication
from ...config import FailureResponse
from ...errors import DecodeError, TimestampParseError
from ...logging_config import get_logger

logger = get_logger(__name__)

EVENT_HEADER = "X-Gitlab-Event"
THANKS = "Thanks!\n"


def create_webhooks_router(app: IApplication) -> APIRouter:
    """Create webhooks router."""
    router = APIRouter(prefix="/api", tags=["webhooks"])
    reject = app.settings.failure_response is FailureResponse.REJECT

    def failure(message: str, reject_status: int) -> PlainTextResponse:
        code = reject_status if reject else status.HTTP_200_OK
        return PlainTextResponse(message, status_code=code)

    @router.post("/message", response_class=PlainTextResponse)
    async def receive_message(request: Request) -> PlainTextResponse:
        """Receive one pipeline or job notification."""
        event_headers = request.headers.getlist(EVENT_HEADER)
        if not event_headers:
            return PlainTextResponse(
                f"Missing header: {EVENT_HEADER}\n",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        if len(event_headers) > 1:
            return PlainTextResponse(
                f"Invalid header: {EVENT_HEADER}\n",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            kind = EventKind(event_headers[0])
        except ValueError:
            return PlainTextResponse(
                f"Invalid event type: {event_headers[0]}\n",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        body = await request.body()
        logger.debug(
            "Received %s webhook",
            kind.label,
            extra={"context": {"body": body.decode("utf-8", errors="replace")}},
        )

        try:
            app.process(kind, body)
        except DecodeError as e:
            logger.error("Error unmarshalling request body: %s", e)
            return failure(
                "Error unmarshalling request body.",
                status.HTTP_400_BAD_REQUEST,
            )
        except TimestampParseError as e:
            return failure(
                f"Error creating trace from {kind.label} object: {e}",
                422,
            )

        return PlainTextResponse(THANKS)

    return router
