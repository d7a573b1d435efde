"""Pipeline and job status model."""

from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    """Statuses GitLab reports for pipelines and jobs."""

    CREATED = "created"
    WAITING_FOR_RESOURCE = "waiting_for_resource"
    PREPARING = "preparing"
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"
    SKIPPED = "skipped"
    MANUAL = "manual"
    SCHEDULED = "scheduled"

    @property
    def is_terminal(self) -> bool:
        """Whether the run has left the created/running states."""
        return self not in NON_TERMINAL_STATUSES

    @classmethod
    def parse(cls, value: str) -> "Status | None":
        """Return the matching status, or None for values GitLab may add later."""
        try:
            return cls(value)
        except ValueError:
            return None


NON_TERMINAL_STATUSES = frozenset({Status.CREATED, Status.RUNNING})


def _non_terminal() -> frozenset[Status]:
    return frozenset(status for status in Status if not status.is_terminal)


@dataclass(frozen=True)
class StatusPolicy:
    """Decides, per status, whether an event is emitted and whether it is timed.

    The two sets are independent: relaxing suppression must not start
    emitting durations for runs that have not finished.
    """

    suppressed_statuses: frozenset[Status] = field(default_factory=_non_terminal)
    untimed_statuses: frozenset[Status] = field(default_factory=_non_terminal)

    def is_suppressed(self, status: str) -> bool:
        """Return True when no span should be emitted for this status.

        Statuses unknown to :class:`Status` are never suppressed.
        """
        return Status.parse(status) in self.suppressed_statuses

    def includes_timing(self, status: str) -> bool:
        """Return True when duration fields are meaningful for this status."""
        return Status.parse(status) not in self.untimed_statuses


DEFAULT_STATUS_POLICY = StatusPolicy()
