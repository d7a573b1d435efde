"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class RecordingSender:
    """Sender that keeps records in memory instead of delivering them."""

    def __init__(self):
        self.records = []
        self.closed = False

    def send(self, record) -> None:
        self.records.append(record)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    """Default settings with no API key."""
    from buildevents.config import Settings

    return Settings()


@pytest.fixture
def sender():
    """Create recording sender."""
    return RecordingSender()


@pytest.fixture
def builder():
    """Create EventBuilder with fixed version."""
    from buildevents.tracing import EventBuilder

    return EventBuilder(ci_provider="GitLab-CI", version="test")


@pytest.fixture
async def application(settings, sender):
    """Create and start an Application with the recording sender."""
    from buildevents.app import Application

    app = Application(settings, sender=sender)
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def make_client(sender):
    """Factory for TestClients running the full FastAPI app."""
    from buildevents.api import create_fastapi_app

    clients = []

    def _make(settings=None):
        from buildevents.config import Settings

        app = create_fastapi_app(settings or Settings(), sender=sender)
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    """TestClient with default settings."""
    return make_client()


@pytest.fixture
def pipeline_payload():
    """Pipeline Hook body as sent by gitlab.com."""
    return {
        "object_kind": "pipeline",
        "object_attributes": {
            "id": 42,
            "ref": "main",
            "tag": False,
            "sha": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "before_sha": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "source": "merge_request_event",
            "status": "success",
            "stages": ["build", "test"],
            "created_at": "2024-01-02 03:04:05 UTC",
            "finished_at": "2024-01-02 03:04:17 UTC",
            "duration": 10,
            "queued_duration": 2,
            "variables": [{"key": "NESTOR", "value": "crying"}],
        },
        "merge_request": {
            "id": 1,
            "iid": 7,
            "title": "Test",
            "source_branch": "feature",
            "source_project_id": 99,
            "target_branch": "main",
            "target_project_id": 100,
            "state": "opened",
            "merge_status": "can_be_merged",
            "url": "https://gitlab.example.com/group/project/-/merge_requests/7",
        },
        "user": {"id": 1, "name": "Administrator", "username": "root"},
        "project": {
            "id": 100,
            "name": "project",
            "web_url": "https://gitlab.example.com/group/project",
            "avatar_url": None,
            "path_with_namespace": "group/project",
            "default_branch": "main",
        },
        "commit": {
            "id": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "message": "test",
            "author": {"name": "User", "email": "user@gitlab.com"},
        },
        "builds": [
            {
                "id": 380,
                "stage": "test",
                "name": "test",
                "status": "failed",
                "created_at": "2024-01-02 03:04:05 UTC",
                "started_at": None,
                "finished_at": None,
                "runner": None,
                "environment": None,
                "artifacts_file": {"filename": None, "size": None},
            }
        ],
    }


@pytest.fixture
def job_payload():
    """Job Hook body as sent by gitlab.com."""
    return {
        "object_kind": "build",
        "ref": "main",
        "tag": False,
        "before_sha": "2293ada6b400935a1378653304eaf6221e0fdb8f",
        "sha": "2293ada6b400935a1378653304eaf6221e0fdb8f",
        "build_id": 1977,
        "build_name": "test",
        "build_stage": "test",
        "build_status": "failed",
        "build_created_at": "2024-01-02 03:04:06 UTC",
        "build_started_at": "2024-01-02 03:04:08 UTC",
        "build_finished_at": "2024-01-02 03:04:20 UTC",
        "build_duration": 12.5,
        "build_queued_duration": 1.25,
        "build_allow_failure": False,
        "build_failure_reason": "script_failure",
        "pipeline_id": 42,
        "project_id": 100,
        "project_name": "group / project",
        "user": {"id": 1, "name": "User", "email": "user@gitlab.com"},
        "commit": {
            "id": 2366,
            "sha": "2293ada6b400935a1378653304eaf6221e0fdb8f",
            "message": "test\n",
            "author_name": "User",
            "status": "created",
            "duration": None,
            "started_at": None,
            "finished_at": None,
        },
        "repository": {
            "name": "project",
            "description": "",
            "homepage": "https://gitlab.example.com/group/project",
            "git_ssh_url": "git@gitlab.example.com:group/project.git",
            "visibility_level": 20,
        },
        "runner": {
            "active": True,
            "is_shared": False,
            "id": 380987,
            "description": "shared-runners-manager-6.gitlab.com",
            "tags": ["linux", "docker"],
        },
        "environment": None,
    }


@pytest.fixture
def encode():
    """Serialize a payload dict the way GitLab sends it."""

    def _encode(payload: dict) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _encode
