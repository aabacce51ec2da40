"""
Exceptions raised by the interaction tracking engine.
"""

from __future__ import annotations

from numbers import Real


class InteractionError(Exception):
    """Base class for interaction monitor errors."""


class InvalidDurationError(InteractionError, ValueError):
    """Raised when a subscription is requested with an unusable timeout."""


def validate_duration(duration_ms: object) -> int:
    """
    Normalise a timeout expressed in milliseconds.

    Integral floats are accepted and converted; negative, fractional,
    boolean and non-numeric values are rejected.
    """
    if isinstance(duration_ms, bool) or not isinstance(duration_ms, Real):
        raise InvalidDurationError(f"Duration must be a number of milliseconds, got {duration_ms!r}.")
    if duration_ms != duration_ms or duration_ms in (float("inf"), float("-inf")):
        raise InvalidDurationError(f"Duration must be finite, got {duration_ms!r}.")
    if int(duration_ms) != duration_ms:
        raise InvalidDurationError(f"Duration must be a whole number of milliseconds, got {duration_ms!r}.")
    if duration_ms < 0:
        raise InvalidDurationError(f"Duration must not be negative, got {duration_ms!r}.")
    return int(duration_ms)
