"""Delivery of span records to Honeycomb."""

import asyncio
import json
import sys
from datetime import datetime, timezone
from typing import Protocol, TextIO
from urllib.parse import quote

import httpx

from ..config import Settings
from ..logging_config import get_logger
from ..models import SpanRecord

logger = get_logger(__name__)


class ISender(Protocol):
    """Fire-and-forget sink for span records."""

    def send(self, record: SpanRecord) -> None:
        """Queue a record for delivery without waiting for it."""
        ...

    async def close(self) -> None:
        """Finish pending deliveries and release resources."""
        ...


class HoneycombSender:
    """Posts each record to the Honeycomb events API in a background task.

    Delivery failures are logged and dropped; nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        dataset: str,
        api_host: str,
        user_agent: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._url = f"{api_host.rstrip('/')}/1/events/{quote(dataset, safe='')}"
        self._headers = {
            "X-Honeycomb-Team": api_key,
            "User-Agent": user_agent,
        }
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._pending: set[asyncio.Task] = set()

    def send(self, record: SpanRecord) -> None:
        """Schedule delivery on the running event loop."""
        task = asyncio.get_running_loop().create_task(self._deliver(record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, record: SpanRecord) -> None:
        headers = dict(self._headers)
        if record.timestamp is not None:
            headers["X-Honeycomb-Event-Time"] = record.timestamp.isoformat()

        try:
            response = await self._client.post(self._url, json=record.fields, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Failed to send event to Honeycomb: %s", e)
            return

        if response.is_error:
            logger.error(
                "Honeycomb rejected event: %s %s",
                response.status_code,
                response.text,
            )

    async def flush(self) -> None:
        """Wait for every delivery scheduled so far."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def close(self) -> None:
        await self.flush()
        await self._client.aclose()


class WriterSender:
    """Writes each record as a JSON line instead of sending it.

    Used when no API key is configured.
    """

    def __init__(self, dataset: str, stream: TextIO | None = None):
        self._dataset = dataset
        self._stream = stream

    def send(self, record: SpanRecord) -> None:
        timestamp = record.timestamp or datetime.now(timezone.utc)
        line = json.dumps(
            {
                "time": timestamp.isoformat(),
                "dataset": self._dataset,
                "data": record.fields,
            },
            default=str,
        )
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

    async def close(self) -> None:
        return


def user_agent(version: str, ci_provider: str) -> str:
    return f"buildevents/{version} ({ci_provider})"


def create_sender(settings: Settings, version: str) -> ISender:
    """Pick the sink for the configured credentials."""
    if settings.writes_to_stdout:
        logger.warning("No API key configured, writing events to stdout")
        return WriterSender(dataset=settings.dataset)
    return HoneycombSender(
        api_key=settings.api_key,
        dataset=settings.dataset,
        api_host=settings.api_host,
        user_agent=user_agent(version, settings.ci_provider),
    )
