"""UTC offset resolution from civil-field rendering.

The oracle never reports offsets directly. Instead the same instant is
rendered twice, once in the requested zone and once in UTC, and both field
sets are read back as if they were UTC wall clocks. The distance between the
two readings is the zone's offset.

Offsets use the ``UTC - zoned`` convention: positive minutes means the zone
is behind UTC (New York in winter is +300), negative means ahead (Tokyo is
-540).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from ..global_config import DEFAULT_OFFSET_CACHE_SIZE, UTC_ZONE
from ..instant import Instant, InstantLike, to_instant
from ..units import MS_PER_MINUTE
from .oracle import CivilTimeOracle, ZoneInfoOracle

logger = logging.getLogger(__name__)


class OffsetResolver:
    """Derives zone offsets from a CivilTimeOracle.

    Results are a pure function of (instant, zone), so they are memoised in
    a bounded LRU cache. The cache is thread-safe and never changes answers.

    Args:
        oracle: Civil-time oracle. Defaults to ZoneInfoOracle.
        cache_size: Max memoised (instant, zone) pairs; 0 disables caching.
    """

    def __init__(
        self,
        oracle: CivilTimeOracle | None = None,
        *,
        cache_size: int = DEFAULT_OFFSET_CACHE_SIZE,
    ) -> None:
        self.oracle = oracle or ZoneInfoOracle()
        if cache_size > 0:
            self._resolve = lru_cache(maxsize=cache_size)(self._compute)
        else:
            self._resolve = self._compute

    def _compute(self, epoch_ms: int, zone: str) -> int:
        instant = Instant(epoch_ms)
        zoned = self.oracle.civil_fields(instant, zone).as_utc_instant()
        utc = self.oracle.civil_fields(instant, UTC_ZONE).as_utc_instant()
        offset = round((utc.epoch_ms - zoned.epoch_ms) / MS_PER_MINUTE)
        logger.debug("Offset of %s at %s: %d min", zone, instant, offset)
        return offset

    def resolve(self, instant: InstantLike, zone: str) -> int:
        """Return the offset of zone at instant, in whole minutes.

        Args:
            instant: Point in time.
            zone: Zone name understood by the oracle (e.g. "Europe/Paris").

        Returns:
            ``UTC - zoned`` in minutes.

        Raises:
            InvalidInstantError: If instant is not date-like.
            UnknownZoneError: If the oracle does not know zone.
        """
        return self._resolve(to_instant(instant).epoch_ms, zone)

    def cache_info(self) -> Any:
        """Return lru_cache statistics, or None when caching is disabled."""
        info = getattr(self._resolve, "cache_info", None)
        return info() if info else None

    def cache_clear(self) -> None:
        clear = getattr(self._resolve, "cache_clear", None)
        if clear:
            clear()


_default_resolver: OffsetResolver | None = None


def get_default_resolver() -> OffsetResolver:
    """Return the shared resolver over ZoneInfoOracle, creating it once."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = OffsetResolver()
    return _default_resolver


def resolve_offset(
    instant: InstantLike,
    zone: str,
    *,
    resolver: OffsetResolver | None = None,
) -> int:
    """Free-function form of ``OffsetResolver.resolve``."""
    return (resolver or get_default_resolver()).resolve(instant, zone)
