"""Tests for GitLab datetime parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from buildevents.errors import TimestampParseError
from buildevents.tracing import resolve_timestamp


class TestAbbreviationFormat:
    """Tests for the hosted GitLab format."""

    def test_utc(self):
        """Test parsing a UTC timestamp."""
        ts = resolve_timestamp("2024-01-02 03:04:05 UTC")
        assert ts == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert ts.tzinfo is timezone.utc

    def test_other_abbreviation_is_zero_offset(self):
        """Test that non-UTC abbreviations keep their name with zero offset."""
        ts = resolve_timestamp("2024-01-02 03:04:05 CET")
        assert ts.utcoffset() == timedelta(0)
        assert ts.tzname() == "CET"


class TestOffsetFormat:
    """Tests for the self-managed GitLab format."""

    def test_positive_offset(self):
        """Test parsing a timestamp east of UTC."""
        ts = resolve_timestamp("2024-01-02 04:04:05 +0100")
        assert ts == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_negative_offset(self):
        """Test parsing a timestamp west of UTC."""
        ts = resolve_timestamp("2024-01-01 20:04:05 -0700")
        assert ts.utcoffset() == timedelta(hours=-7)
        assert ts == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_same_instant_in_both_formats(self):
        """Test that both formats resolve to the same instant."""
        assert resolve_timestamp("2024-01-02 03:04:05 UTC") == resolve_timestamp(
            "2024-01-02 03:04:05 +0000"
        )


class TestInvalidTimestamps:
    """Tests for strings matching neither format."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "2024-01-02T03:04:05Z",
            "2024-01-02 03:04:05",
            "2024-01-02 03:04:05 +01:00",
            "2024-13-02 03:04:05 UTC",
            "yesterday",
            "2024-01-02 03:04:05 utc",
        ],
    )
    def test_raises_parse_error(self, raw):
        """Test that unknown formats raise TimestampParseError."""
        with pytest.raises(TimestampParseError) as exc_info:
            resolve_timestamp(raw)
        assert exc_info.value.raw == raw
        assert exc_info.value.record is None

    def test_error_names_original_string(self):
        """Test that the error message includes the input."""
        with pytest.raises(TimestampParseError, match="not a date"):
            resolve_timestamp("not a date")
