"""Trace, span and parent identifiers for GitLab pipelines and jobs."""

import hashlib
from typing import NamedTuple

from ..models import JobNotification, Notification, PipelineNotification


class TraceIdentity(NamedTuple):
    trace_id: str
    span_id: str
    parent_id: str | None = None


def job_span_id(job_name: str) -> str:
    """Hex MD5 of the job name.

    Two jobs with the same name in one pipeline share a span id; a re-run of
    a job overwrites its earlier span instead of adding a sibling.
    """
    return hashlib.md5(job_name.encode("utf-8")).hexdigest()


def derive_identity(notification: Notification) -> TraceIdentity:
    """Return the identifiers placing a notification in its pipeline's trace.

    A pipeline is the trace root: its id is both trace and span id. A job is
    a child of its pipeline's span.
    """
    if isinstance(notification, PipelineNotification):
        pipeline_id = str(notification.object_attributes.id)
        return TraceIdentity(trace_id=pipeline_id, span_id=pipeline_id)
    if isinstance(notification, JobNotification):
        pipeline_id = str(notification.pipeline_id)
        return TraceIdentity(
            trace_id=pipeline_id,
            span_id=job_span_id(notification.build_name),
            parent_id=pipeline_id,
        )
    raise TypeError(f"unsupported notification type: {type(notification).__name__}")
