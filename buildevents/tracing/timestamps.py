"""Parsing of GitLab webhook datetime strings."""

import re
from datetime import datetime, timedelta, timezone

from ..errors import TimestampParseError

# gitlab.com: "2024-01-02 03:04:05 UTC"
_ABBREVIATION_FORMAT = re.compile(
    r"^(?P<local>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<zone>[A-Z]{3,5})$"
)
# self-managed GitLab: "2024-01-02 03:04:05 +0100"
_OFFSET_FORMAT = re.compile(
    r"^(?P<local>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<offset>[+-]\d{4})$"
)
_LOCAL_FORMAT = "%Y-%m-%d %H:%M:%S"
_UTC_NAMES = {"UTC", "GMT"}


def _parse_abbreviation(raw: str) -> datetime | None:
    match = _ABBREVIATION_FORMAT.match(raw)
    if not match:
        return None
    try:
        local = datetime.strptime(match["local"], _LOCAL_FORMAT)
    except ValueError:
        return None
    zone = match["zone"]
    # An abbreviation carries no offset, so anything but UTC is pinned to zero offset
    tz = timezone.utc if zone in _UTC_NAMES else timezone(timedelta(0), zone)
    return local.replace(tzinfo=tz)


def _parse_offset(raw: str) -> datetime | None:
    if not _OFFSET_FORMAT.match(raw):
        return None
    try:
        return datetime.strptime(raw, f"{_LOCAL_FORMAT} %z")
    except ValueError:
        return None


def resolve_timestamp(raw: str) -> datetime:
    """Parse a GitLab datetime string into an aware datetime.

    Hosted GitLab sends a zone abbreviation, self-managed instances send a
    numeric UTC offset. The abbreviation form is tried first.

    Raises:
        TimestampParseError: neither format matches.
    """
    for parse in (_parse_abbreviation, _parse_offset):
        timestamp = parse(raw)
        if timestamp is not None:
            return timestamp
    raise TimestampParseError(raw)
