"""Exception types for the project."""

from __future__ import annotations

from typing import Any


class ChronoshiftError(Exception):
    """Base exception for chronoshift errors."""


class InvalidInstantError(ChronoshiftError, ValueError):
    """Raised when a value cannot be represented as a point in time."""


class UnsupportedUnitError(ChronoshiftError, ValueError):
    """Raised when a calendar unit is not one of the recognised units."""


class UnknownZoneError(ChronoshiftError, ValueError):
    """Raised when a civil-time oracle does not know a zone name."""


def invalid_instant(value: Any, reason: str | None = None) -> InvalidInstantError:
    """Build an InvalidInstantError with a consistent message.

    Args:
        value: The offending input.
        reason: Optional detail appended to the message.

    Returns:
        InvalidInstantError ready to be raised.
    """
    message = f"Invalid instant: {value!r}"
    if reason:
        message = f"{message} ({reason})"
    return InvalidInstantError(message)
