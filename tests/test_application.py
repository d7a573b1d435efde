"""Tests for Application."""

import pytest

from buildevents import __version__
from buildevents.app import Application, EventKind
from buildevents.config import Settings
from buildevents.errors import DecodeError, TimestampParseError
from buildevents.transmission import WriterSender


class TestApplicationLifecycle:
    """Tests for Application start/stop."""

    async def test_sender_before_start_raises(self, settings):
        """Test that the sender is unavailable before start()."""
        app = Application(settings)
        with pytest.raises(RuntimeError):
            _ = app.sender

    async def test_start_creates_stdout_sender(self, settings):
        """Test that no API key means stdout delivery."""
        app = Application(settings)
        await app.start()
        assert isinstance(app.sender, WriterSender)
        await app.stop()

    async def test_stop_closes_sender(self, settings, sender):
        app = Application(settings, sender=sender)
        await app.start()
        await app.stop()
        assert sender.closed

    async def test_builder_uses_settings(self, sender):
        """Test that provider and extra fields reach the builder."""
        app = Application(
            Settings(ci_provider="GitLab-EE", extra_fields={"team": "infra"}), sender=sender
        )
        await app.start()
        record = app.process(EventKind.JOB, b'{"build_status": "success", "build_started_at": "2024-01-02 03:04:05 UTC"}')
        assert record.fields["ci_provider"] == "GitLab-EE"
        assert record.fields["team"] == "infra"
        assert record.fields["meta.version"] == __version__
        await app.stop()


class TestApplicationProcess:
    """Tests for Application.process()."""

    async def test_pipeline_sent(self, application, sender, pipeline_payload, encode):
        record = application.process(EventKind.PIPELINE, encode(pipeline_payload))
        assert sender.records == [record]

    async def test_suppressed_not_sent(self, application, sender, job_payload, encode):
        job_payload["build_status"] = "running"
        assert application.process(EventKind.JOB, encode(job_payload)) is None
        assert sender.records == []

    async def test_decode_error_not_sent(self, application, sender):
        with pytest.raises(DecodeError):
            application.process(EventKind.PIPELINE, b"<xml/>")
        assert sender.records == []

    async def test_timestamp_error_still_sent(self, application, sender, job_payload, encode):
        job_payload["build_started_at"] = "later"
        with pytest.raises(TimestampParseError) as exc_info:
            application.process(EventKind.JOB, encode(job_payload))
        assert sender.records == [exc_info.value.record]


class TestEventKind:
    """Tests for EventKind."""

    def test_header_values(self):
        assert EventKind("Pipeline Hook") is EventKind.PIPELINE
        assert EventKind("Job Hook") is EventKind.JOB

    def test_labels(self):
        assert EventKind.PIPELINE.label == "pipeline"
        assert EventKind.JOB.label == "job"
