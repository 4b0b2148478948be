"""Tests for calendar arithmetic."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chronoshift.arithmetic import (
    add,
    days_in_month,
    diff,
    end_of,
    get_components,
    is_after,
    is_before,
    is_same,
    start_of,
    subtract,
)
from chronoshift.errors import UnsupportedUnitError
from chronoshift.instant import CivilFields, Instant
from chronoshift.units import CalendarUnit

At = Callable[..., Instant]

FIXED_UNITS = [
    CalendarUnit.MILLISECOND,
    CalendarUnit.SECOND,
    CalendarUnit.MINUTE,
    CalendarUnit.HOUR,
    CalendarUnit.DAY,
    CalendarUnit.WEEK,
]


@pytest.mark.unit
class TestAddFixedUnits:
    """Fixed-length units add exact durations."""

    @pytest.mark.parametrize("unit", FIXED_UNITS)
    @pytest.mark.parametrize("amount", [1, 7, 400])
    def test_add_then_subtract_is_identity(self, at: At, unit: CalendarUnit, amount: int) -> None:
        t = at(2024, 3, 10, 1, 59, 59, 123000)
        assert subtract(add(t, amount, unit), amount, unit) == t

    def test_week_is_seven_days(self, at: At) -> None:
        t = at(2024, 1, 1)
        assert add(t, 2, CalendarUnit.WEEK) == add(t, 14, CalendarUnit.DAY)

    def test_negative_amount_moves_backwards(self, at: At) -> None:
        assert add(at(2024, 1, 1), -1, "hour") == at(2023, 12, 31, 23)

    def test_fractional_hours(self, at: At) -> None:
        assert add(at(2024, 1, 1), 1.5, "hours") == at(2024, 1, 1, 1, 30)

    def test_accepts_iso_strings(self) -> None:
        assert add("2024-01-15", 5, "day") == Instant.parse("2024-01-20")


@pytest.mark.unit
class TestAddCalendarUnits:
    """Month and year shifts clamp the day of month."""

    def test_month_clamps_to_leap_february(self, at: At) -> None:
        assert add(at(2024, 1, 31), 1, CalendarUnit.MONTH) == at(2024, 2, 29)

    def test_subtract_month_clamps_to_leap_february(self, at: At) -> None:
        assert add(at(2024, 3, 31), -1, CalendarUnit.MONTH) == at(2024, 2, 29)
        assert subtract(at(2024, 3, 31), 1, CalendarUnit.MONTH) == at(2024, 2, 29)

    def test_month_clamps_to_common_february(self, at: At) -> None:
        assert add(at(2023, 1, 31), 1, CalendarUnit.MONTH) == at(2023, 2, 28)

    def test_month_preserves_time_of_day(self, at: At) -> None:
        assert add(at(2024, 1, 31, 10, 30, 5), 1, "month") == at(2024, 2, 29, 10, 30, 5)

    def test_month_rolls_over_year(self, at: At) -> None:
        assert add(at(2023, 12, 15), 1, "month") == at(2024, 1, 15)
        assert add(at(2024, 1, 15), -13, "month") == at(2022, 12, 15)

    def test_month_never_rolls_into_following_month(self, at: At) -> None:
        result = add(at(2024, 5, 31), 1, "month")
        assert get_components(result).month == 6
        assert get_components(result).day == 30

    def test_year_from_leap_day(self, at: At) -> None:
        assert add(at(2024, 2, 29), 1, CalendarUnit.YEAR) == at(2025, 2, 28)
        assert add(at(2024, 2, 29), 4, CalendarUnit.YEAR) == at(2028, 2, 29)

    def test_month_subtract_is_lossy_after_clamp(self, at: At) -> None:
        shifted = add(at(2024, 1, 31), 1, "month")
        assert subtract(shifted, 1, "month") == at(2024, 1, 29)

    def test_fractional_months_rejected(self, at: At) -> None:
        with pytest.raises(ValueError, match="whole numbers"):
            add(at(2024, 1, 1), 1.5, "month")

    def test_integral_float_months_accepted(self, at: At) -> None:
        assert add(at(2024, 1, 1), 2.0, "month") == at(2024, 3, 1)


@pytest.mark.unit
class TestDiff:
    def test_days(self) -> None:
        assert diff("2024-01-15", "2024-01-10", CalendarUnit.DAY) == 5

    def test_default_unit_is_day(self) -> None:
        assert diff("2024-01-10", "2024-01-15") == -5

    def test_fractional_units(self, at: At) -> None:
        assert diff(at(2024, 1, 1, 1, 30), at(2024, 1, 1), "hour") == 1.5
        assert diff(at(2024, 1, 11), at(2024, 1, 1), "week") == pytest.approx(10 / 7)

    def test_milliseconds_are_exact(self, at: At) -> None:
        assert diff(at(2024, 1, 1, 0, 0, 1), at(2024, 1, 1), "millisecond") == 1000

    def test_months_ignore_day(self) -> None:
        assert diff("2023-11-15", "2024-01-15", CalendarUnit.MONTH) == -2
        assert diff("2024-02-01", "2024-01-31", CalendarUnit.MONTH) == 1

    def test_years(self) -> None:
        assert diff("2024-01-01", "2023-12-31", CalendarUnit.YEAR) == 1
        assert diff("2020-06-01", "2024-06-01", "years") == -4


@pytest.mark.unit
class TestStartEndOf:
    @pytest.mark.parametrize(
        "fields",
        [(2024, 1, 1), (2024, 2, 29, 23, 59), (2024, 3, 10, 12), (2023, 12, 31, 5), (1970, 1, 1)],
    )
    def test_week_bounds(self, at: At, fields: tuple[int, ...]) -> None:
        t = at(*fields)
        start = start_of(t, CalendarUnit.WEEK).to_datetime()
        end = end_of(t, CalendarUnit.WEEK).to_datetime()

        assert start.weekday() == 0
        assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)
        assert end.weekday() == 6
        assert (end.hour, end.minute, end.second, end.microsecond) == (23, 59, 59, 999000)
        assert start <= t.to_datetime() <= end

    def test_end_of_month_leap_year(self) -> None:
        assert end_of("2024-02-15", "month").isoformat() == "2024-02-29T23:59:59.999Z"

    def test_end_of_month_common_year(self) -> None:
        assert end_of("2023-02-15", "month").isoformat() == "2023-02-28T23:59:59.999Z"

    def test_end_of_december(self) -> None:
        assert end_of("2023-12-02", "month").isoformat() == "2023-12-31T23:59:59.999Z"

    def test_year_bounds(self) -> None:
        assert start_of("2024-07-04T12:00:00Z", "year").isoformat() == "2024-01-01T00:00:00.000Z"
        assert end_of("2024-07-04T12:00:00Z", "year").isoformat() == "2024-12-31T23:59:59.999Z"

    def test_start_of_month(self) -> None:
        assert start_of("2024-02-29T13:14:15Z", "month").isoformat() == "2024-02-01T00:00:00.000Z"

    def test_small_units(self) -> None:
        t = "2024-05-06T07:08:09.123Z"
        assert start_of(t, "millisecond").isoformat() == "2024-05-06T07:08:09.123Z"
        assert start_of(t, "second").isoformat() == "2024-05-06T07:08:09.000Z"
        assert end_of(t, "second").isoformat() == "2024-05-06T07:08:09.999Z"
        assert start_of(t, "minute").isoformat() == "2024-05-06T07:08:00.000Z"
        assert end_of(t, "hour").isoformat() == "2024-05-06T07:59:59.999Z"
        assert end_of(t, "day").isoformat() == "2024-05-06T23:59:59.999Z"

    def test_before_epoch(self) -> None:
        t = Instant(-500)
        assert start_of(t, "second") == Instant(-1000)
        assert start_of(t, "day").isoformat() == "1969-12-31T00:00:00.000Z"


@pytest.mark.unit
class TestUnsupportedUnits:
    @pytest.mark.parametrize("unit", [None, "fortnight", "", 42, "Day-ish"])
    def test_all_operations_reject(self, at: At, unit: object) -> None:
        t = at(2024, 1, 1)
        with pytest.raises(UnsupportedUnitError):
            add(t, 1, unit)  # type: ignore[arg-type]
        with pytest.raises(UnsupportedUnitError):
            subtract(t, 1, unit)  # type: ignore[arg-type]
        with pytest.raises(UnsupportedUnitError):
            diff(t, t, unit)  # type: ignore[arg-type]
        with pytest.raises(UnsupportedUnitError):
            start_of(t, unit)  # type: ignore[arg-type]
        with pytest.raises(UnsupportedUnitError):
            end_of(t, unit)  # type: ignore[arg-type]

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unsupported time unit"):
            CalendarUnit.coerce("fortnight")

    @pytest.mark.parametrize("alias", ["day", "days", "DAY", " Days ", CalendarUnit.DAY])
    def test_aliases(self, alias: object) -> None:
        assert CalendarUnit.coerce(alias) is CalendarUnit.DAY

    def test_calendar_units_have_no_fixed_length(self) -> None:
        assert not CalendarUnit.MONTH.is_fixed
        with pytest.raises(UnsupportedUnitError):
            CalendarUnit.YEAR.milliseconds


@pytest.mark.unit
class TestComparisons:
    def test_exact_comparison_by_default(self, at: At) -> None:
        assert is_after(at(2024, 1, 1, 0, 0, 1), at(2024, 1, 1))
        assert is_before(at(2024, 1, 1), at(2024, 1, 1, 0, 0, 1))

    def test_same_day_granularity(self, at: At) -> None:
        a = at(2024, 1, 1, 23)
        b = at(2024, 1, 1, 1)
        assert not is_after(a, b, "day")
        assert not is_before(b, a, "day")
        assert is_same(a, b, "day")

    def test_month_granularity(self, at: At) -> None:
        assert is_after(at(2024, 2, 1), at(2024, 1, 31), CalendarUnit.MONTH)
        assert not is_same(at(2024, 2, 1), at(2024, 1, 31), CalendarUnit.MONTH)

    def test_rejects_unknown_granularity(self, at: At) -> None:
        with pytest.raises(UnsupportedUnitError):
            is_after(at(2024, 1, 1), at(2024, 1, 1), "decade")


@pytest.mark.unit
class TestComponents:
    def test_get_components(self) -> None:
        assert get_components("2024-02-29T13:14:15.678Z") == CivilFields(2024, 2, 29, 13, 14, 15, 678)

    @pytest.mark.parametrize(
        ("year", "month", "expected"),
        [(2024, 2, 29), (2023, 2, 28), (1900, 2, 28), (2000, 2, 29), (2024, 4, 30), (2024, 12, 31)],
    )
    def test_days_in_month(self, year: int, month: int, expected: int) -> None:
        assert days_in_month(year, month) == expected
