"""Runtime settings and the supplemental fields file."""

import math
import shlex
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Union

from .errors import ConfigError

DEFAULT_DATASET = "buildevents"
DEFAULT_API_HOST = "https://api.honeycomb.io"
DEFAULT_CI_PROVIDER = "GitLab-CI"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

PathLike = Union[str, Path]


class FailureResponse(str, Enum):
    """HTTP status policy for webhooks that were received but not processed.

    ACKNOWLEDGE answers 200 so GitLab never retries or flags the hook;
    REJECT answers 4xx so failures show up in GitLab's webhook log.
    """

    ACKNOWLEDGE = "acknowledge"
    REJECT = "reject"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, resolved once at startup and never mutated."""

    api_key: str = ""
    dataset: str = DEFAULT_DATASET
    api_host: str = DEFAULT_API_HOST
    ci_provider: str = DEFAULT_CI_PROVIDER
    extra_fields: Mapping[str, Any] = field(default_factory=dict)
    failure_response: FailureResponse = FailureResponse.ACKNOWLEDGE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def writes_to_stdout(self) -> bool:
        """Without an API key events are printed instead of sent."""
        return not self.api_key


def _coerce(value: str) -> Any:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        return value
    # inf and nan have no JSON encoding
    return number if math.isfinite(number) else value


def parse_extra_fields(text: str) -> dict[str, Any]:
    """Parse logfmt-style ``key=value`` pairs.

    Pairs may share a line or span several; values may be quoted and lines
    starting with ``#`` are comments. Numeric values become int or float.
    """
    fields: dict[str, Any] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            raise ConfigError(f"line {lineno}: {e}") from e
        for token in tokens:
            if token.startswith("#"):
                break
            key, sep, value = token.partition("=")
            if not key:
                raise ConfigError(f"line {lineno}: missing key in {token!r}")
            fields[key] = _coerce(value) if sep else True
    return fields


def load_extra_fields(path: PathLike | None) -> dict[str, Any]:
    """Read the supplemental fields file, if one is configured."""
    if not path:
        return {}
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read fields file {path}: {e}") from e
    return parse_extra_fields(text)
