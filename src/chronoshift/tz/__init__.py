"""Timezone offsets, DST detection and transition search.

All zone knowledge comes from a CivilTimeOracle; see ``oracle.py``.
"""

from .convert import convert
from .dst import dst_offsets, is_dst
from .offsets import OffsetResolver, get_default_resolver, resolve_offset
from .oracle import CivilTimeOracle, FixedOffsetOracle, ZoneInfoOracle
from .transitions import DSTWindow, find_exact_transition, find_year_transitions

__all__ = [
    "CivilTimeOracle",
    "DSTWindow",
    "FixedOffsetOracle",
    "OffsetResolver",
    "ZoneInfoOracle",
    "convert",
    "dst_offsets",
    "find_exact_transition",
    "find_year_transitions",
    "get_default_resolver",
    "is_dst",
    "resolve_offset",
]
