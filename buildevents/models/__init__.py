"""Data models for GitLab webhooks and emitted spans."""

from .base import Runner, User, WebhookModel
from .job import JobCommit, JobNotification, Repository
from .pipeline import (
    Build,
    Commit,
    MergeRequest,
    PipelineAttributes,
    PipelineNotification,
    Project,
)
from .span import SpanRecord
from .status import DEFAULT_STATUS_POLICY, Status, StatusPolicy

Notification = PipelineNotification | JobNotification

__all__ = [
    # Payloads
    "WebhookModel",
    "User",
    "Runner",
    "PipelineNotification",
    "PipelineAttributes",
    "MergeRequest",
    "Project",
    "Commit",
    "Build",
    "JobNotification",
    "JobCommit",
    "Repository",
    "Notification",
    # Status
    "Status",
    "StatusPolicy",
    "DEFAULT_STATUS_POLICY",
    # Output
    "SpanRecord",
]
