"""Locating the instants at which a zone's offset changes.

``find_year_transitions`` walks a year one UTC midnight at a time until it
sees the offset change, then hands the straddling pair of days to
``find_exact_transition``, which bisects down to the configured resolution.
A year costs at most ~365 daily samples plus ~21 per transition found.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from ..global_config import TRANSITION_RESOLUTION_MS
from ..instant import Instant, InstantLike, to_instant
from .dst import dst_offsets
from .offsets import OffsetResolver, get_default_resolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DSTWindow:
    """The two offset transitions of one zone in one calendar year.

    Attributes:
        start: First transition of the year, or None.
        end: Second transition of the year, or None.
    """

    start: Instant | None = None
    end: Instant | None = None

    @property
    def has_dst(self) -> bool:
        return self.start is not None


def find_exact_transition(
    before: InstantLike,
    after: InstantLike,
    zone: str,
    *,
    resolution_ms: int = TRANSITION_RESOLUTION_MS,
    resolver: OffsetResolver | None = None,
) -> Instant:
    """Bisect [before, after] for the instant zone's offset changes.

    The bracket must straddle exactly one offset change. The offset at
    ``before`` is the baseline; a midpoint with the baseline offset moves the
    lower bound up, any other offset moves the upper bound down.

    Args:
        before: Instant known to be on the old offset.
        after: Instant known to be on the new offset.
        zone: Zone name understood by the resolver's oracle.
        resolution_ms: Stop once the bracket is at most this wide.
        resolver: Offset resolver. Defaults to the shared ZoneInfo resolver.

    Returns:
        The upper bound of the final bracket: the first sampled instant on the
        new offset, at most ``resolution_ms`` after the true transition.

    Raises:
        ValueError: If before is later than after or resolution_ms < 1.
    """
    if resolution_ms < 1:
        raise ValueError(f"resolution_ms must be >= 1, got {resolution_ms}")
    resolver = resolver or get_default_resolver()
    lo = to_instant(before).epoch_ms
    hi = to_instant(after).epoch_ms
    if lo > hi:
        raise ValueError(f"before ({Instant(lo)}) is later than after ({Instant(hi)})")

    baseline = resolver.resolve(Instant(lo), zone)
    steps = 0
    while hi - lo > resolution_ms:
        mid = (lo + hi) // 2
        if resolver.resolve(Instant(mid), zone) == baseline:
            lo = mid
        else:
            hi = mid
        steps += 1

    logger.debug("Transition in %s narrowed to %s after %d steps", zone, Instant(hi), steps)
    return Instant(hi)


def find_year_transitions(
    year: int,
    zone: str,
    *,
    resolution_ms: int = TRANSITION_RESOLUTION_MS,
    resolver: OffsetResolver | None = None,
) -> DSTWindow:
    """Find the (at most two) offset transitions of zone in year.

    Zones whose Jan 1 and Jul 1 offsets agree return an empty window without
    scanning. Otherwise each UTC midnight from Jan 2 onwards is compared with
    the previous one; every change is refined with ``find_exact_transition``.
    Scanning stops after the second transition.

    Args:
        year: Calendar year.
        zone: Zone name understood by the resolver's oracle.
        resolution_ms: Precision passed to ``find_exact_transition``.
        resolver: Offset resolver. Defaults to the shared ZoneInfo resolver.

    Returns:
        DSTWindow with start/end in chronological order, or both None.
    """
    resolver = resolver or get_default_resolver()
    if dst_offsets(year, zone, resolver=resolver) is None:
        logger.debug("No DST in %s for %d", zone, year)
        return DSTWindow()

    found: list[Instant] = []
    previous_day = datetime(year, 1, 1, tzinfo=UTC)
    previous_offset = resolver.resolve(Instant.from_datetime(previous_day), zone)
    current_day = previous_day + timedelta(days=1)

    while current_day.year == year and len(found) < 2:
        current = Instant.from_datetime(current_day)
        current_offset = resolver.resolve(current, zone)
        if current_offset != previous_offset:
            transition = find_exact_transition(
                Instant.from_datetime(previous_day),
                current,
                zone,
                resolution_ms=resolution_ms,
                resolver=resolver,
            )
            logger.info(
                "Offset change in %s at %s (%d -> %d min)",
                zone,
                transition,
                previous_offset,
                current_offset,
            )
            found.append(transition)
            previous_offset = current_offset
        previous_day = current_day
        current_day += timedelta(days=1)

    return DSTWindow(
        start=found[0] if found else None,
        end=found[1] if len(found) > 1 else None,
    )
