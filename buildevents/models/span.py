"""Span record handed to the transmission sink."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

TRACE_ID = "trace.trace_id"
SPAN_ID = "trace.span_id"
PARENT_ID = "trace.parent_id"


@dataclass
class SpanRecord:
    """One trace span as a flat set of Honeycomb event fields."""

    fields: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime | None = None  # span start; None lets the backend use receipt time

    @property
    def trace_id(self) -> str | None:
        return self.fields.get(TRACE_ID)

    @property
    def span_id(self) -> str | None:
        return self.fields.get(SPAN_ID)

    @property
    def parent_id(self) -> str | None:
        return self.fields.get(PARENT_ID)

    def to_dict(self) -> dict[str, Any]:
        """Serializable view used for logging."""
        return {
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "fields": dict(self.fields),
        }
