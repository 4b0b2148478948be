"""
chronoshift core package.

Calendar arithmetic and timezone-offset engine:
- Shifting, differencing and truncating instants by calendar unit
  (`chronoshift.arithmetic`)
- UTC offsets, DST membership and DST transition search for named zones,
  built on a pluggable civil-time oracle (`chronoshift.tz`)
- A Typer-based CLI over both (`chronoshift.cli`)

Configuration:
- Shared, project-wide constants live in `chronoshift.global_config`.
"""

from .arithmetic import (
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
from .errors import (
    ChronoshiftError,
    InvalidInstantError,
    UnknownZoneError,
    UnsupportedUnitError,
)
from .instant import CivilFields, Instant, InstantLike, to_instant
from .tz import (
    CivilTimeOracle,
    DSTWindow,
    FixedOffsetOracle,
    OffsetResolver,
    ZoneInfoOracle,
    convert,
    find_exact_transition,
    find_year_transitions,
    is_dst,
    resolve_offset,
)
from .units import CalendarUnit

__all__ = [
    # Values
    "CalendarUnit",
    "CivilFields",
    "Instant",
    "InstantLike",
    "to_instant",
    # Calendar arithmetic
    "add",
    "days_in_month",
    "diff",
    "end_of",
    "get_components",
    "is_after",
    "is_before",
    "is_same",
    "start_of",
    "subtract",
    # Timezones
    "CivilTimeOracle",
    "DSTWindow",
    "FixedOffsetOracle",
    "OffsetResolver",
    "ZoneInfoOracle",
    "convert",
    "find_exact_transition",
    "find_year_transitions",
    "is_dst",
    "resolve_offset",
    # Errors
    "ChronoshiftError",
    "InvalidInstantError",
    "UnknownZoneError",
    "UnsupportedUnitError",
]
