"""Translation of GitLab webhooks into trace spans."""

from .builder import EventBuilder
from .identifiers import TraceIdentity, derive_identity, job_span_id
from .timestamps import resolve_timestamp

__all__ = [
    "EventBuilder",
    "TraceIdentity",
    "derive_identity",
    "job_span_id",
    "resolve_timestamp",
]
