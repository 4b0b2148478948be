"""Daylight-saving-time membership.

A zone is taken to observe DST in a year when its offsets on Jan 1 and Jul 1
differ. The anchor whose wall clock runs further ahead (the smaller
``UTC - zoned`` offset) is the DST offset. Nothing assumes which half of the
year is summer, so southern-hemisphere zones work the same way.

Zones with more than two transitions a year, or whose Jan/Jul offsets are not
their two steady states, are outside what this heuristic handles.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ..global_config import DST_ANCHOR_MONTHS
from ..instant import Instant, InstantLike, to_instant
from .offsets import OffsetResolver, get_default_resolver


def anchor_instants(year: int) -> tuple[Instant, Instant]:
    """Return the two sampling instants (day 1, 00:00 UTC) for a year."""
    first, second = DST_ANCHOR_MONTHS
    return (
        Instant.from_datetime(datetime(year, first, 1, tzinfo=UTC)),
        Instant.from_datetime(datetime(year, second, 1, tzinfo=UTC)),
    )


def dst_offsets(
    year: int,
    zone: str,
    *,
    resolver: OffsetResolver | None = None,
) -> tuple[int, int] | None:
    """Return (standard_offset, dst_offset) for zone in year.

    Returns:
        The pair of offsets in minutes, or None when both anchors agree
        (the zone has no DST that year).
    """
    resolver = resolver or get_default_resolver()
    jan, jul = (resolver.resolve(a, zone) for a in anchor_instants(year))
    if jan == jul:
        return None
    return max(jan, jul), min(jan, jul)


def is_dst(
    instant: InstantLike,
    zone: str,
    *,
    resolver: OffsetResolver | None = None,
) -> bool:
    """Return True if instant falls inside zone's DST period.

    Always False for zones whose Jan 1 and Jul 1 offsets match, which covers
    both never-DST and permanent-DST zones.

    Args:
        instant: Point in time; its UTC year picks the anchors.
        zone: Zone name understood by the resolver's oracle.
        resolver: Offset resolver. Defaults to the shared ZoneInfo resolver.
    """
    resolver = resolver or get_default_resolver()
    instant = to_instant(instant)
    offsets = dst_offsets(instant.to_datetime().year, zone, resolver=resolver)
    if offsets is None:
        return False
    _, dst_offset = offsets
    return resolver.resolve(instant, zone) == dst_offset
