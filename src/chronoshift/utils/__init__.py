"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    assert_iana_zone,
    format_ts_for_display,
    format_ts_utc_z,
    parse_date_or_datetime,
    parse_ts_utc,
    utc_now,
)

__all__ = [
    # Time utilities (canonical time handling)
    "assert_iana_zone",
    "format_ts_for_display",
    "format_ts_utc_z",
    "parse_date_or_datetime",
    "parse_ts_utc",
    "utc_now",
]
