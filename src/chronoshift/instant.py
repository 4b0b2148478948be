"""Instant and civil-field value types.

An Instant is an absolute point in time stored as integer milliseconds since
the Unix epoch. CivilFields is the wall-clock decomposition of an instant in
some zone. Both are immutable; every operation returns a new value.

Date-like inputs (datetimes, ISO strings, epoch numbers) are resolved once at
the boundary by ``to_instant``; engine functions work on Instant only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from .errors import invalid_instant
from .utils.time import format_ts_utc_z, parse_date_or_datetime, utc_now

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class Instant:
    """Absolute point in time, milliseconds since 1970-01-01T00:00:00Z."""

    epoch_ms: int

    def __post_init__(self) -> None:
        if isinstance(self.epoch_ms, bool) or not isinstance(self.epoch_ms, int):
            raise invalid_instant(self.epoch_ms, "epoch_ms must be an int")

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build an Instant from a datetime.

        Naive datetimes are interpreted as UTC. Sub-millisecond precision is
        floored.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return cls((dt - EPOCH) // _ONE_MS)

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse an ISO-8601 date or datetime string (naive means UTC).

        Raises:
            InvalidInstantError: If the string cannot be parsed.
        """
        try:
            return cls.from_datetime(parse_date_or_datetime(text))
        except ValueError as e:
            raise invalid_instant(text, str(e)) from e

    @classmethod
    def now(cls) -> Instant:
        return cls.from_datetime(utc_now())

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime."""
        try:
            return EPOCH + timedelta(milliseconds=self.epoch_ms)
        except OverflowError as e:
            raise invalid_instant(self.epoch_ms, "outside the representable range") from e

    def isoformat(self) -> str:
        """Canonical form: YYYY-MM-DDTHH:MM:SS.mmmZ."""
        return format_ts_utc_z(self.to_datetime(), timespec="milliseconds")

    def shifted(self, ms: int) -> Instant:
        return Instant(self.epoch_ms + ms)

    def __str__(self) -> str:
        return self.isoformat()


InstantLike = Instant | datetime | date | int | float | str


def to_instant(value: InstantLike) -> Instant:
    """Resolve a date-like value into an Instant.

    Args:
        value: An Instant, a datetime (naive means UTC), a date (midnight
            UTC), epoch milliseconds as int or float (floats are floored),
            or an ISO-8601 string.

    Returns:
        The corresponding Instant.

    Raises:
        InvalidInstantError: If the value is not date-like or cannot be
            represented.
    """
    if isinstance(value, Instant):
        return value
    if isinstance(value, bool) or value is None:
        raise invalid_instant(value, "not a date-like value")
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, date):
        return Instant.from_datetime(datetime(value.year, value.month, value.day, tzinfo=UTC))
    if isinstance(value, int):
        return Instant(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise invalid_instant(value, "not finite")
        return Instant(math.floor(value))
    if isinstance(value, str):
        return Instant.parse(value)
    raise invalid_instant(value, f"unsupported type {type(value).__name__}")


@dataclass(frozen=True)
class CivilFields:
    """Wall-clock fields of an instant in a particular zone.

    Attributes:
        year: Gregorian year.
        month: Month, 1-12.
        day: Day of month.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> CivilFields:
        """Take the wall-clock fields of dt as-is, ignoring its tzinfo."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            millisecond=dt.microsecond // 1000,
        )

    @classmethod
    def from_instant(cls, instant: Instant) -> CivilFields:
        """Decompose an instant on the UTC wall clock."""
        return cls.from_datetime(instant.to_datetime())

    def to_datetime(self) -> datetime:
        """Return the fields as an aware datetime on the UTC wall clock.

        Raises:
            InvalidInstantError: If the fields do not form a valid date/time.
        """
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.millisecond * 1000,
                tzinfo=UTC,
            )
        except ValueError as e:
            raise invalid_instant(self, str(e)) from e

    def as_utc_instant(self) -> Instant:
        """Re-interpret these fields as if they were a UTC wall clock."""
        return Instant.from_datetime(self.to_datetime())
