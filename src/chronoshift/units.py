"""Calendar units understood by the arithmetic engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

from .errors import UnsupportedUnitError

MS_PER_SECOND: Final = 1000
MS_PER_MINUTE: Final = 60 * MS_PER_SECOND
MS_PER_HOUR: Final = 60 * MS_PER_MINUTE
MS_PER_DAY: Final = 24 * MS_PER_HOUR
MS_PER_WEEK: Final = 7 * MS_PER_DAY


class CalendarUnit(str, Enum):
    """Closed set of calendar units.

    Units below MONTH have a fixed length in milliseconds. MONTH and YEAR
    vary with the calendar and need civil-field handling.
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def __str__(self) -> str:
        return self.value

    @property
    def is_fixed(self) -> bool:
        """True when the unit has a constant length in milliseconds."""
        return self in _FIXED_LENGTH_MS

    @property
    def milliseconds(self) -> int:
        """Length of a fixed unit in milliseconds.

        Raises:
            UnsupportedUnitError: For MONTH and YEAR, which have no fixed length.
        """
        try:
            return _FIXED_LENGTH_MS[self]
        except KeyError:
            raise UnsupportedUnitError(f"{self.value} has no fixed length") from None

    @classmethod
    def coerce(cls, value: Any) -> CalendarUnit:
        """Validate and normalize a unit argument.

        Accepts an enum member, its value ("day"), its name ("DAY") or the
        plural form ("days"), case-insensitively.

        Args:
            value: Unit to validate.

        Returns:
            The matching CalendarUnit.

        Raises:
            UnsupportedUnitError: If value is None, not a string, or unknown.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedUnitError(f"Unsupported time unit: {value!r}")

        key = value.strip().lower()
        unit = _ALIASES.get(key)
        if unit is None:
            raise UnsupportedUnitError(
                f"Unsupported time unit: {value!r}. "
                f"Known units: {', '.join(u.value for u in cls)}"
            )
        return unit


_FIXED_LENGTH_MS: Final[dict[CalendarUnit, int]] = {
    CalendarUnit.MILLISECOND: 1,
    CalendarUnit.SECOND: MS_PER_SECOND,
    CalendarUnit.MINUTE: MS_PER_MINUTE,
    CalendarUnit.HOUR: MS_PER_HOUR,
    CalendarUnit.DAY: MS_PER_DAY,
    CalendarUnit.WEEK: MS_PER_WEEK,
}

_ALIASES: Final[dict[str, CalendarUnit]] = {
    **{u.value: u for u in CalendarUnit},
    **{f"{u.value}s": u for u in CalendarUnit},
}
