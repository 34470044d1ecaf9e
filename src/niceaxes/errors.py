"""Exception types raised by niceaxes.

All errors derive from ``ValueError`` so callers that already guard numeric
input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class NiceAxesError(ValueError):
    """Base class for all niceaxes errors."""


class InvalidRange(NiceAxesError):
    """Bounds are not increasing, not finite, or not positive on a log scale."""


class InvalidDigits(NiceAxesError):
    """Requested significant-digit count is out of range."""


class ColorInterpolationError(NiceAxesError):
    """A color ramp cannot be built (e.g. fewer than two stops requested)."""


class TimeConversionError(NiceAxesError):
    """A continuous time value or calendar field set cannot be converted."""
