"""Calendar arithmetic on instants.

Shifting, differencing and truncating instants by calendar unit. Civil fields
are taken on the UTC wall clock, so nothing here depends on a timezone
database.

Month and year shifts clamp the day of month to the last valid day of the
destination month (Jan 31 + 1 month = Feb 28/29). Because of that clamp,
``subtract`` is not an exact inverse of ``add`` for MONTH and YEAR.
"""

from __future__ import annotations

import calendar
from datetime import timedelta

from .errors import invalid_instant
from .instant import CivilFields, Instant, InstantLike, to_instant
from .units import CalendarUnit


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (leap-aware)."""
    return calendar.monthrange(year, month)[1]


def _whole_amount(amount: float, unit: CalendarUnit) -> int:
    if isinstance(amount, float) and not amount.is_integer():
        raise ValueError(f"{unit.value} amounts must be whole numbers, got {amount}")
    return int(amount)


def _shift_months(instant: Instant, months: int) -> Instant:
    dt = instant.to_datetime()
    year, month_index = divmod(dt.year * 12 + (dt.month - 1) + months, 12)
    month = month_index + 1
    # Go through day 1 so the month change itself never overflows
    try:
        shifted = dt.replace(day=1).replace(year=year, month=month)
    except ValueError as e:
        raise invalid_instant(instant.epoch_ms, str(e)) from e
    return Instant.from_datetime(shifted.replace(day=min(dt.day, days_in_month(year, month))))


def add(instant: InstantLike, amount: float, unit: CalendarUnit | str) -> Instant:
    """Add an amount of a calendar unit to an instant.

    Fixed-length units (millisecond through week) add an exact duration.
    MONTH and YEAR keep the time of day and clamp the day of month.

    Args:
        instant: Starting point.
        amount: Number of units; negative values move backwards.
        unit: Calendar unit.

    Returns:
        The shifted Instant.

    Raises:
        UnsupportedUnitError: If unit is not a recognised CalendarUnit.
        ValueError: If amount is fractional for MONTH or YEAR.
    """
    unit = CalendarUnit.coerce(unit)
    instant = to_instant(instant)

    if unit.is_fixed:
        return instant.shifted(round(amount * unit.milliseconds))

    months = _whole_amount(amount, unit)
    if unit is CalendarUnit.YEAR:
        months *= 12
    return _shift_months(instant, months)


def subtract(instant: InstantLike, amount: float, unit: CalendarUnit | str) -> Instant:
    """Subtract an amount of a calendar unit; ``add`` with the amount negated."""
    return add(instant, -amount, unit)


def diff(
    a: InstantLike,
    b: InstantLike,
    unit: CalendarUnit | str = CalendarUnit.DAY,
) -> int | float:
    """Signed difference ``a - b`` expressed in unit.

    Fixed-length units give the elapsed time divided by the unit length,
    possibly fractional. MONTH counts calendar months between the two
    (year/month fields only, day ignored) and YEAR counts calendar years.

    Raises:
        UnsupportedUnitError: If unit is not a recognised CalendarUnit.
    """
    unit = CalendarUnit.coerce(unit)
    a = to_instant(a)
    b = to_instant(b)

    if unit is CalendarUnit.MILLISECOND:
        return a.epoch_ms - b.epoch_ms
    if unit.is_fixed:
        return (a.epoch_ms - b.epoch_ms) / unit.milliseconds

    fa = CivilFields.from_instant(a)
    fb = CivilFields.from_instant(b)
    if unit is CalendarUnit.MONTH:
        return (fa.year - fb.year) * 12 + (fa.month - fb.month)
    return fa.year - fb.year


def start_of(instant: InstantLike, unit: CalendarUnit | str) -> Instant:
    """Truncate an instant to the first millisecond of its containing unit.

    Weeks start on Monday regardless of locale.

    Raises:
        UnsupportedUnitError: If unit is not a recognised CalendarUnit.
    """
    unit = CalendarUnit.coerce(unit)
    instant = to_instant(instant)

    if unit is CalendarUnit.WEEK:
        day_start = start_of(instant, CalendarUnit.DAY)
        weekday = day_start.to_datetime().weekday()
        return Instant.from_datetime(day_start.to_datetime() - timedelta(days=weekday))
    if unit.is_fixed:
        length = unit.milliseconds
        return Instant(instant.epoch_ms // length * length)

    dt = instant.to_datetime().replace(hour=0, minute=0, second=0, microsecond=0, day=1)
    if unit is CalendarUnit.YEAR:
        dt = dt.replace(month=1)
    return Instant.from_datetime(dt)


def end_of(instant: InstantLike, unit: CalendarUnit | str) -> Instant:
    """Advance an instant to the last millisecond of its containing unit.

    Weeks end on Sunday 23:59:59.999. Month and year ends are found as the
    start of the following period minus one millisecond, so leap years come
    out right.

    Raises:
        UnsupportedUnitError: If unit is not a recognised CalendarUnit.
    """
    unit = CalendarUnit.coerce(unit)
    start = start_of(instant, unit)

    if unit.is_fixed:
        return start.shifted(unit.milliseconds - 1)
    months = 12 if unit is CalendarUnit.YEAR else 1
    return _shift_months(start, months).shifted(-1)


def is_after(
    a: InstantLike,
    b: InstantLike,
    granularity: CalendarUnit | str = CalendarUnit.MILLISECOND,
) -> bool:
    """True if a falls in a later granularity period than b."""
    return start_of(a, granularity) > start_of(b, granularity)


def is_before(
    a: InstantLike,
    b: InstantLike,
    granularity: CalendarUnit | str = CalendarUnit.MILLISECOND,
) -> bool:
    """True if a falls in an earlier granularity period than b."""
    return start_of(a, granularity) < start_of(b, granularity)


def is_same(
    a: InstantLike,
    b: InstantLike,
    granularity: CalendarUnit | str = CalendarUnit.MILLISECOND,
) -> bool:
    """True if a and b fall in the same granularity period."""
    return start_of(a, granularity) == start_of(b, granularity)


def get_components(instant: InstantLike) -> CivilFields:
    """Return the UTC civil fields of an instant."""
    return CivilFields.from_instant(to_instant(instant))
