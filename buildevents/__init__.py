"""GitLab CI webhooks to Honeycomb trace spans."""

__version__ = "0.1.0"

from .app import Application, EventKind, IApplication  # noqa: E402
from .config import FailureResponse, Settings  # noqa: E402
from .errors import (  # noqa: E402
    BuildEventsError,
    ConfigError,
    DecodeError,
    TimestampParseError,
)
from .models import (  # noqa: E402
    JobNotification,
    PipelineNotification,
    SpanRecord,
    Status,
    StatusPolicy,
)
from .tracing import EventBuilder, derive_identity, resolve_timestamp  # noqa: E402
from .transmission import HoneycombSender, ISender, WriterSender  # noqa: E402

__all__ = [
    "__version__",
    # Application
    "Application",
    "IApplication",
    "EventKind",
    "Settings",
    "FailureResponse",
    # Errors
    "BuildEventsError",
    "ConfigError",
    "DecodeError",
    "TimestampParseError",
    # Models
    "PipelineNotification",
    "JobNotification",
    "SpanRecord",
    "Status",
    "StatusPolicy",
    # Components
    "EventBuilder",
    "derive_identity",
    "resolve_timestamp",
    "ISender",
    "HoneycombSender",
    "WriterSender",
]
