"""Significant-digit rounding toward larger or smaller values.

``round_ceiling`` never returns less than its input and ``round_floor`` never
returns more, so a range built from them always contains the raw range.

Examples for 8803.364:

    digits  round_ceiling  round_floor
    0       10000          0
    1       9000           8000
    2       8900           8800
    3       8810           8800
    4       8804           8803
"""

from __future__ import annotations

import math

from niceaxes.errors import InvalidDigits, InvalidRange

# Quotients within this many units in the last place of an integer are treated
# as exact, so that decimal inputs such as 0.3 round to themselves instead of a
# neighbour.
_SNAP_ULPS = 4


def scale_by_power_of_ten(mantissa: float, exponent: int) -> float:
    """Return ``mantissa * 10**exponent`` with a single rounding step.

    Negative exponents divide by an exact power of ten, which keeps values like
    ``3 * 10**-1`` equal to the literal ``0.3``.
    """
    if exponent >= 0:
        return mantissa * 10.0 ** exponent
    return mantissa / 10.0 ** -exponent


def snap_quotient(q: float, ulps: int = _SNAP_ULPS) -> float:
    """Snap ``q`` onto the nearest integer when it is within ``ulps`` units in the last place."""
    nearest = round(q)
    if abs(q - nearest) <= ulps * math.ulp(q):
        return float(nearest)
    return q


def floor_log10(value: float) -> int:
    """Largest ``k`` with ``10**k <= value`` for positive ``value``."""
    k = math.floor(math.log10(value))
    # log10 can round up just below a power of ten
    if scale_by_power_of_ten(1.0, k) > value:
        k -= 1
    return k


def ceil_log10(value: float) -> int:
    """Smallest ``k`` with ``10**k >= value`` for positive ``value``."""
    k = floor_log10(value)
    if scale_by_power_of_ten(1.0, k) < value:
        k += 1
    return k


def _check(value: float, digits: int) -> None:
    if digits < 0:
        raise InvalidDigits(f"digits must be >= 0, got {digits}")
    if not math.isfinite(value):
        raise InvalidRange(f"cannot round non-finite value {value}")


def _step_exponent(value: float, digits: int) -> int:
    return floor_log10(abs(value)) - digits + 1


def round_ceiling(value: float, digits: int) -> float:
    """Round ``value`` up to ``digits`` significant figures.

    For negative values this moves toward zero (-434.79 -> -430 for 2 digits).
    ``digits == 0`` rounds to a whole power of ten. Zero is returned unchanged.

    Raises:
        InvalidDigits: If ``digits`` is negative.
        InvalidRange: If ``value`` is not finite.
    """
    _check(value, digits)
    if value == 0:
        return 0.0
    exponent = _step_exponent(value, digits)
    q = snap_quotient(scale_by_power_of_ten(value, -exponent))
    n = math.ceil(q)
    # a snapped quotient can land one unit short of the value
    if scale_by_power_of_ten(n, exponent) < value:
        n += 1
    # + 0.0 turns -0.0 into 0.0
    return scale_by_power_of_ten(n, exponent) + 0.0


def round_floor(value: float, digits: int) -> float:
    """Round ``value`` down to ``digits`` significant figures.

    For negative values this moves away from zero (-434.79 -> -440 for 2 digits).
    ``digits == 0`` rounds to a whole power of ten. Zero is returned unchanged.

    Raises:
        InvalidDigits: If ``digits`` is negative.
        InvalidRange: If ``value`` is not finite.
    """
    _check(value, digits)
    if value == 0:
        return 0.0
    exponent = _step_exponent(value, digits)
    q = snap_quotient(scale_by_power_of_ten(value, -exponent))
    n = math.floor(q)
    if scale_by_power_of_ten(n, exponent) > value:
        n -= 1
    return scale_by_power_of_ten(n, exponent) + 0.0
