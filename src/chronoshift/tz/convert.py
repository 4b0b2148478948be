"""Re-expressing a wall clock from one zone in another."""

from __future__ import annotations

from ..instant import Instant, InstantLike, to_instant
from .oracle import CivilTimeOracle, ZoneInfoOracle


def convert(
    wall_clock: InstantLike,
    from_zone: str,
    to_zone: str,
    *,
    oracle: CivilTimeOracle | None = None,
) -> Instant:
    """Re-express a wall-clock instant from from_zone in to_zone.

    The instant is rendered under ``from_zone`` and the fields read back as
    UTC, giving the absolute moment. That moment is rendered under
    ``to_zone`` and read back as UTC again, so the result's UTC fields are
    the ``to_zone`` wall clock.

    Example:
        convert("2023-01-01T15:00:00Z", "UTC", "America/New_York")
        -> 2023-01-01T10:00:00.000Z

    Raises:
        InvalidInstantError: If wall_clock is not date-like.
        UnknownZoneError: If either zone is unknown to the oracle.
    """
    oracle = oracle or ZoneInfoOracle()
    absolute = oracle.civil_fields(to_instant(wall_clock), from_zone).as_utc_instant()
    return oracle.civil_fields(absolute, to_zone).as_utc_instant()
