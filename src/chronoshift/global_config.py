"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only
shared, cross-cutting constants that many modules can import.
"""

# Core Names
PACKAGE_NAME = "chronoshift"

# Zones
UTC_ZONE = "UTC"

# Timezone engine
# Binary search stops once the bracket is this narrow (DST changes land on whole minutes)
TRANSITION_RESOLUTION_MS = 60_000
# Max (instant, zone) pairs memoised per OffsetResolver; 0 disables the cache
DEFAULT_OFFSET_CACHE_SIZE = 4096
# Months sampled (day 1, 00:00 UTC) to decide whether a zone observes DST in a year
DST_ANCHOR_MONTHS: tuple[int, int] = (1, 7)
