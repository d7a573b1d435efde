"""Application bootstrap and lifecycle management."""

from enum import Enum
from typing import Protocol

from . import __version__
from .config import Settings
from .errors import TimestampParseError
from .logging_config import get_logger
from .models import (
    DEFAULT_STATUS_POLICY,
    JobNotification,
    PipelineNotification,
    SpanRecord,
    StatusPolicy,
)
from .tracing import EventBuilder
from .transmission import ISender, create_sender

logger = get_logger(__name__)


class EventKind(str, Enum):
    """Values GitLab puts in the ``X-Gitlab-Event`` header."""

    PIPELINE = "Pipeline Hook"
    JOB = "Job Hook"

    @property
    def label(self) -> str:
        return "pipeline" if self is EventKind.PIPELINE else "job"


_DECODERS = {
    EventKind.PIPELINE: PipelineNotification,
    EventKind.JOB: JobNotification,
}


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    @property
    def settings(self) -> Settings:
        ...

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    def process(self, kind: EventKind, body: bytes) -> SpanRecord | None:
        """Decode a webhook body, build its span and hand it to the sender."""
        ...


class Application:
    """Wires settings, event builder and sender together."""

    def __init__(
        self,
        settings: Settings,
        sender: ISender | None = None,
        policy: StatusPolicy = DEFAULT_STATUS_POLICY,
    ):
        self._settings = settings
        self._policy = policy
        self._builder = EventBuilder(
            ci_provider=settings.ci_provider,
            version=__version__,
            extra_fields=settings.extra_fields,
        )
        self._sender = sender

    async def start(self) -> None:
        """Create the sender unless one was injected."""
        logger.info("Starting buildevents %s", __version__)
        if self._sender is None:
            self._sender = create_sender(self._settings, __version__)
        logger.info(
            "Sending events to dataset %s via %s",
            self._settings.dataset,
            type(self._sender).__name__,
        )

    async def stop(self) -> None:
        """Flush and close the sender."""
        if self._sender:
            await self._sender.close()
            logger.info("Sender closed")

    def process(self, kind: EventKind, body: bytes) -> SpanRecord | None:
        """Decode a webhook body, build its span and hand it to the sender.

        Returns the record sent, or None when the status is suppressed.

        Raises:
            DecodeError: body is not a valid payload for ``kind``.
            TimestampParseError: the start time is unparseable. The record
                is still sent, stamped by the backend with receipt time.
        """
        notification = _DECODERS[kind].decode(body)
        try:
            record = self._builder.build(notification, self._policy)
        except TimestampParseError as e:
            if e.record is not None:
                self.sender.send(e.record)
            raise
        if record is not None:
            self.sender.send(record)
        return record

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def sender(self) -> ISender:
        """Get sender instance."""
        if not self._sender:
            raise RuntimeError("Application not started")
        return self._sender
