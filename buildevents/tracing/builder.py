"""Builds Honeycomb span records from GitLab pipeline and job webhooks."""

from typing import Any, Mapping

from ..errors import TimestampParseError
from ..logging_config import get_logger
from ..models import (
    DEFAULT_STATUS_POLICY,
    JobNotification,
    Notification,
    PipelineNotification,
    SpanRecord,
    StatusPolicy,
)
from ..models.span import PARENT_ID, SPAN_ID, TRACE_ID
from .identifiers import derive_identity
from .timestamps import resolve_timestamp

logger = get_logger(__name__)


class EventBuilder:
    """Turns a decoded notification into a span record.

    Every record carries the CI provider label, the service version and the
    supplemental fields given at construction. The builder holds no
    per-request state and is shared by all requests.
    """

    def __init__(
        self,
        ci_provider: str,
        version: str,
        extra_fields: Mapping[str, Any] | None = None,
    ):
        self._ci_provider = ci_provider
        self._version = version
        self._extra_fields = dict(extra_fields or {})

    def build(
        self,
        notification: Notification,
        policy: StatusPolicy = DEFAULT_STATUS_POLICY,
    ) -> SpanRecord | None:
        """Build the span record for a notification.

        Returns None when the policy suppresses the notification's status.

        Raises:
            TimestampParseError: the start time could not be parsed. The
                record, complete except for its timestamp, is attached to
                the error.
        """
        status = notification.status
        if policy.is_suppressed(status):
            logger.debug("Suppressing %s event with status %s", _kind(notification), status)
            return None

        record = SpanRecord(fields=self._base_fields())
        identity = derive_identity(notification)
        record.fields[TRACE_ID] = identity.trace_id
        record.fields[SPAN_ID] = identity.span_id
        if identity.parent_id is not None:
            record.fields[PARENT_ID] = identity.parent_id

        if isinstance(notification, PipelineNotification):
            record.fields.update(self._pipeline_fields(notification))
            started_at = notification.object_attributes.created_at
        else:
            record.fields.update(self._job_fields(notification))
            started_at = notification.build_started_at

        if policy.includes_timing(status):
            record.fields.update(_timing_fields(notification))

        try:
            record.timestamp = resolve_timestamp(started_at)
        except TimestampParseError as e:
            logger.warning(
                "Failed to parse timestamp: %s",
                e,
                extra={"context": record.to_dict()},
            )
            raise TimestampParseError(e.raw, record=record) from e

        logger.info("Built %s span", _kind(notification), extra={"context": record.to_dict()})
        return record

    def _base_fields(self) -> dict[str, Any]:
        fields = dict(self._extra_fields)
        fields["ci_provider"] = self._ci_provider
        fields["meta.version"] = self._version
        return fields

    def _pipeline_fields(self, pipeline: PipelineNotification) -> dict[str, Any]:
        attributes = pipeline.object_attributes
        merge_request = pipeline.merge_request
        return {
            "service_name": "pipeline",
            "name": f"build {attributes.id}",
            "branch": attributes.ref,
            "build_num": attributes.id,
            "build_url": pipeline.build_url,
            "pr_number": merge_request.iid,
            "pr_branch": merge_request.source_branch,
            "pr_repo": merge_request.source_project_id,
            "repo": pipeline.project.web_url,
            "status": attributes.status,
        }

    def _job_fields(self, job: JobNotification) -> dict[str, Any]:
        return {
            "service_name": "job",
            "name": job.build_name,
            "branch": job.ref,
            "build_num": job.pipeline_id,
            "build_id": job.build_id,
            "repo": job.repository.homepage,
            "status": job.build_status,
        }


def _timing_fields(notification: Notification) -> dict[str, Any]:
    if isinstance(notification, PipelineNotification):
        duration = notification.object_attributes.duration
        queued = notification.object_attributes.queued_duration
    else:
        duration = notification.build_duration
        queued = notification.build_queued_duration
    return {
        "duration_ms": duration * 1000,
        "queued_duration_ms": queued * 1000,
    }


def _kind(notification: Notification) -> str:
    return "pipeline" if isinstance(notification, PipelineNotification) else "job"
