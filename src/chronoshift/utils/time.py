"""Canonical timestamp utilities.

This module is the single place where timestamps cross the text boundary:
- Canonical instant strings: YYYY-MM-DDTHH:MM:SSZ or YYYY-MM-DDTHH:MM:SS.mmmZ
- Lenient parsing of dates/datetimes typed by users (naive means UTC)
- IANA zone validation and display helpers for the CLI

Internal operations use Instant values; only boundaries serialize to strings.
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

_TIMESPECS = ("seconds", "milliseconds")


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def format_ts_utc_z(dt: datetime, *, timespec: str = "seconds") -> str:
    """Format a datetime as canonical UTC instant string.

    Converts any aware datetime to UTC before formatting. For naive datetimes,
    raises ValueError (caller must provide timezone context).

    Args:
        dt: Datetime to format. Must be timezone-aware. If not UTC, converts to UTC.
        timespec: "seconds" (YYYY-MM-DDTHH:MM:SSZ) or "milliseconds"
            (YYYY-MM-DDTHH:MM:SS.mmmZ).

    Returns:
        Canonical instant string ending in Z.

    Raises:
        ValueError: If dt is naive (no timezone) or timespec is unsupported.
    """
    if dt.tzinfo is None:
        raise ValueError(
            f"Cannot format naive datetime {dt}. Provide timezone context first."
        )

    if timespec not in _TIMESPECS:
        raise ValueError(
            f"Canonical format requires timespec in {_TIMESPECS}, got {timespec}"
        )

    if dt.tzinfo != UTC:
        dt = dt.astimezone(UTC)

    iso_str = dt.isoformat(timespec=timespec)
    # Replace +00:00 with Z
    if iso_str.endswith("+00:00"):
        return iso_str[:-6] + "Z"
    return iso_str + "Z"


def parse_ts_utc(s: str) -> datetime:
    """Parse a canonical UTC instant string to tz-aware UTC datetime.

    Accepts both ...Z and ...+00:00 formats, with or without fractional
    seconds.

    Args:
        s: Timestamp string in RFC3339 UTC format.

    Returns:
        Tz-aware UTC datetime object.

    Raises:
        ValueError: If string format is invalid or naive.
    """
    text = s[:-1] + "+00:00" if s.endswith("Z") else s
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {s}") from e
    if dt.tzinfo is None:
        raise ValueError(
            f"Timestamp {s} is naive. Provide UTC timestamp with Z or +00:00."
        )
    return dt.astimezone(UTC)


def assert_iana_zone(s: str) -> None:
    """Validate that a string is a valid IANA timezone identifier.

    Args:
        s: String to validate.

    Raises:
        ValueError: If string is not a valid IANA zone.
    """
    if not isinstance(s, str) or not s.strip():
        raise ValueError(f"Expected non-empty string, got: {s!r}")

    try:
        ZoneInfo(s)
    except Exception as e:
        raise ValueError(f"Invalid IANA timezone: {s}") from e


def format_ts_for_display(dt_utc: datetime, *, tz: str) -> str:
    """Format a UTC datetime as wall-clock time in a zone.

    This is a view-only operation; never persist the result.

    Args:
        dt_utc: Aware datetime.
        tz: IANA timezone for display.

    Returns:
        "YYYY-MM-DD HH:MM:SS+HH:MM" in the given zone.
    """
    if dt_utc.tzinfo is None:
        raise ValueError("Cannot display naive datetime")
    return dt_utc.astimezone(ZoneInfo(tz)).isoformat(sep=" ", timespec="seconds")


def parse_date_or_datetime(s: str) -> datetime:
    """Parse a string that may be either a date or a datetime.

    Date-only strings (YYYY-MM-DD) become midnight UTC. Datetimes without an
    offset are interpreted as UTC; datetimes with an offset are converted.

    Args:
        s: ISO-8601 date or datetime, optionally ending in Z.

    Returns:
        Tz-aware UTC datetime object.

    Raises:
        ValueError: If string format is invalid.
    """
    if not isinstance(s, str) or not s.strip():
        raise ValueError(f"Expected non-empty string, got: {s!r}")

    s = s.strip()

    if s.endswith(("Z", "z")):
        return parse_ts_utc(s[:-1] + "Z")

    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise ValueError(
            f"Invalid date/datetime format: {s}. "
            "Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS[.fff][Z|+HH:MM]"
        ) from e

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
