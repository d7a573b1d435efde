"""Error types raised while turning webhooks into span events."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.span import SpanRecord


class BuildEventsError(Exception):
    """Base class for all buildevents errors."""


class DecodeError(BuildEventsError):
    """Request body is not a valid webhook payload."""


class TimestampParseError(BuildEventsError):
    """A GitLab datetime string matched none of the known formats.

    When raised by the event builder, ``record`` holds the span record that
    was built anyway (without a timestamp) so callers can still inspect or
    send it.
    """

    def __init__(self, raw: str, record: "SpanRecord | None" = None):
        self.raw = raw
        self.record = record
        super().__init__(f'parsing time "{raw}": matches no known GitLab datetime format')


class ConfigError(BuildEventsError):
    """Startup configuration could not be loaded."""
