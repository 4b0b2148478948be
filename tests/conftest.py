from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta

import pytest

from chronoshift.errors import UnknownZoneError
from chronoshift.instant import CivilFields, Instant
from chronoshift.tz import FixedOffsetOracle, OffsetResolver

# Transition instants of the synthetic zones below (real 2023 rules)
NORTH_DST_START = Instant.from_datetime(datetime(2023, 3, 12, 7, 0, tzinfo=UTC))
NORTH_DST_END = Instant.from_datetime(datetime(2023, 11, 5, 6, 0, tzinfo=UTC))
SOUTH_DST_END = Instant.from_datetime(datetime(2023, 4, 1, 16, 0, tzinfo=UTC))
SOUTH_DST_START = Instant.from_datetime(datetime(2023, 9, 30, 16, 0, tzinfo=UTC))


class SteppedOracle:
    """Synthetic oracle whose offsets change at known instants.

    Each zone is an initial offset followed by (instant, new_offset) steps,
    offsets in ``UTC - zoned`` minutes.
    """

    def __init__(self, zones: dict[str, tuple[int, Sequence[tuple[Instant, int]]]]) -> None:
        self.zones = zones
        self.calls = 0

    def offset_at(self, instant: Instant, zone: str) -> int:
        if zone == "UTC":
            return 0
        try:
            offset, steps = self.zones[zone]
        except KeyError:
            raise UnknownZoneError(zone) from None
        for at, new_offset in steps:
            if instant >= at:
                offset = new_offset
        return offset

    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        self.calls += 1
        shifted = instant.to_datetime() - timedelta(minutes=self.offset_at(instant, zone))
        return CivilFields.from_datetime(shifted)


@pytest.fixture
def stepped_oracle() -> SteppedOracle:
    """
    "Test/North" behaves like New York in 2023 (300 -> 240 -> 300).
    "Test/South" behaves like Sydney in 2023 (-660 -> -600 -> -660).
    """
    return SteppedOracle(
        {
            "Test/North": (300, [(NORTH_DST_START, 240), (NORTH_DST_END, 300)]),
            "Test/South": (-660, [(SOUTH_DST_END, -600), (SOUTH_DST_START, -660)]),
            "Test/Fixed": (-540, []),
        }
    )


@pytest.fixture
def stepped_resolver(stepped_oracle: SteppedOracle) -> OffsetResolver:
    return OffsetResolver(stepped_oracle)


@pytest.fixture
def fixed_resolver() -> OffsetResolver:
    """Fixed-offset zones only: Tokyo-like and Kolkata-like."""
    return OffsetResolver(FixedOffsetOracle({"Fixed/Tokyo": -540, "Fixed/Kolkata": -330}))


@pytest.fixture
def at() -> Callable[..., Instant]:
    """Shorthand for building UTC instants: at(2024, 1, 31, 10, 30)."""

    def _at(*fields: int) -> Instant:
        return Instant.from_datetime(datetime(*fields, tzinfo=UTC))

    return _at
