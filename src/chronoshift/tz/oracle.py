"""Civil-time oracles.

An oracle answers a single question: what does the wall clock read in zone Z
at instant T? Everything else in ``chronoshift.tz`` (offsets, DST detection,
transition search, conversion) is derived from that answer, so any timezone
database binding can serve as an oracle.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, timedelta, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import UnknownZoneError
from ..global_config import UTC_ZONE
from ..instant import CivilFields, Instant


@runtime_checkable
class CivilTimeOracle(Protocol):
    """Renders an instant as wall-clock fields for a named zone."""

    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        """Return the civil fields of instant in zone (24-hour clock).

        Raises:
            UnknownZoneError: If zone is not known to the oracle.
        """
        ...


class ZoneInfoOracle:
    """Oracle backed by the IANA database through ``zoneinfo``.

    The fixed zone "UTC" is answered without a database lookup so UTC
    rendering keeps working on hosts without tzdata.
    """

    def _zone(self, zone: str) -> tzinfo:
        if zone == UTC_ZONE:
            return UTC
        try:
            return ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise UnknownZoneError(f"Unknown timezone: {zone!r}") from e

    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        return CivilFields.from_datetime(instant.to_datetime().astimezone(self._zone(zone)))


class FixedOffsetOracle:
    """Oracle for zones whose offset never changes.

    Args:
        offsets: Zone name -> offset in minutes, ``UTC - zoned`` (positive
            behind UTC, the same sign convention as OffsetResolver).
            "UTC" is always known.
    """

    def __init__(self, offsets: Mapping[str, int]) -> None:
        self.offsets = {UTC_ZONE: 0, **offsets}

    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        try:
            offset = self.offsets[zone]
        except KeyError:
            raise UnknownZoneError(f"Unknown timezone: {zone!r}") from None
        return CivilFields.from_datetime(instant.to_datetime() - timedelta(minutes=offset))
