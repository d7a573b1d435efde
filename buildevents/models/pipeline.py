"""Pipeline Hook payload models."""

from typing import Any

from pydantic import Field

from .base import Runner, User, WebhookModel


class Variable(WebhookModel):
    key: str = ""
    value: str = ""


class PipelineAttributes(WebhookModel):
    """The ``object_attributes`` block of a pipeline event."""

    id: int = 0
    ref: str = ""
    tag: bool = False
    sha: str = ""
    before_sha: str = ""
    source: str = ""
    status: str = ""
    stages: list[str] = []
    created_at: str = ""
    finished_at: str = ""
    duration: int = 0  # seconds
    queued_duration: int = 0  # seconds
    variables: list[Variable] = []


class MergeRequest(WebhookModel):
    """Merge request the pipeline runs for, if any."""

    id: int = 0
    iid: int = 0
    title: str = ""
    source_branch: str = ""
    source_project_id: int = 0
    target_branch: str = ""
    target_project_id: int = 0
    state: str = ""
    merge_status: str = ""
    url: str = ""


class Project(WebhookModel):
    id: int = 0
    name: str = ""
    description: str = ""
    web_url: str = ""
    avatar_url: Any = None
    git_ssh_url: str = ""
    git_http_url: str = ""
    namespace: str = ""
    visibility_level: int = 0
    path_with_namespace: str = ""
    default_branch: str = ""


class Author(WebhookModel):
    name: str = ""
    email: str = ""


class Commit(WebhookModel):
    id: str = ""
    message: str = ""
    timestamp: str = ""
    url: str = ""
    author: Author = Field(default_factory=Author)


class ArtifactsFile(WebhookModel):
    filename: Any = None
    size: Any = None


class Environment(WebhookModel):
    name: str = ""
    action: str = ""


class Build(WebhookModel):
    """Summary of one job as embedded in a pipeline event."""

    id: int = 0
    stage: str = ""
    name: str = ""
    status: str = ""
    created_at: str = ""
    started_at: str | None = None
    finished_at: str | None = None
    when: str = ""
    manual: bool = False
    allow_failure: bool = False
    user: User = Field(default_factory=User)
    runner: Runner | None = None
    artifacts_file: ArtifactsFile = Field(default_factory=ArtifactsFile)
    environment: Environment | None = None


class PipelineNotification(WebhookModel):
    """One pipeline run, as delivered by a ``Pipeline Hook`` webhook."""

    object_kind: str = ""
    object_attributes: PipelineAttributes = Field(default_factory=PipelineAttributes)
    merge_request: MergeRequest = Field(default_factory=MergeRequest)
    user: User = Field(default_factory=User)
    project: Project = Field(default_factory=Project)
    commit: Commit = Field(default_factory=Commit)
    builds: list[Build] = []

    @property
    def status(self) -> str:
        return self.object_attributes.status

    @property
    def build_url(self) -> str:
        """Link to the pipeline page in the GitLab UI."""
        return f"{self.project.web_url}/-/pipelines/{self.object_attributes.id}"
