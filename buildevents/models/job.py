"""Job Hook payload models."""

from typing import Any

from pydantic import Field

from .base import Runner, User, WebhookModel


class JobCommit(WebhookModel):
    id: int = 0
    sha: str = ""
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    status: str = ""
    duration: Any = None
    started_at: Any = None
    finished_at: Any = None


class Repository(WebhookModel):
    name: str = ""
    description: str = ""
    homepage: str = ""
    git_ssh_url: str = ""
    git_http_url: str = ""
    visibility_level: int = 0


class JobNotification(WebhookModel):
    """One CI job, as delivered by a ``Job Hook`` webhook."""

    object_kind: str = ""
    ref: str = ""
    tag: bool = False
    before_sha: str = ""
    sha: str = ""
    build_id: int = 0
    build_name: str = ""
    build_stage: str = ""
    build_status: str = ""
    build_created_at: str = ""
    build_started_at: str = ""
    build_finished_at: str = ""
    build_duration: float = 0.0  # seconds
    build_queued_duration: float = 0.0  # seconds
    build_allow_failure: bool = False
    build_failure_reason: str = ""
    pipeline_id: int = 0
    project_id: int = 0
    project_name: str = ""
    user: User = Field(default_factory=User)
    commit: JobCommit = Field(default_factory=JobCommit)
    repository: Repository = Field(default_factory=Repository)
    runner: Runner = Field(default_factory=Runner)
    environment: Any = None

    @property
    def status(self) -> str:
        return self.build_status
