"""Unit tests for significant-digit rounding."""

from __future__ import annotations

import math
import random

import pytest

from niceaxes.axis.rounding import ceil_log10, floor_log10, round_ceiling, round_floor
from niceaxes.errors import InvalidDigits, InvalidRange, NiceAxesError


@pytest.mark.parametrize(
    "digits, ceiling, floor",
    [
        (0, 10000.0, 0.0),
        (1, 9000.0, 8000.0),
        (2, 8900.0, 8800.0),
        (3, 8810.0, 8800.0),
        (4, 8804.0, 8803.0),
    ],
)
def test_round_positive_value(digits: int, ceiling: float, floor: float) -> None:
    """8803.364 rounds up and down to the expected significant figures."""
    assert round_ceiling(8803.364, digits) == pytest.approx(ceiling)
    assert round_floor(8803.364, digits) == pytest.approx(floor)


@pytest.mark.parametrize(
    "digits, ceiling, floor",
    [
        (1, -400.0, -500.0),
        (2, -430.0, -440.0),
        (3, -434.0, -435.0),
        (4, -434.7, -434.8),
    ],
)
def test_round_negative_value(digits: int, ceiling: float, floor: float) -> None:
    """Ceiling moves toward zero and floor away from zero for negative values."""
    assert round_ceiling(-434.79, digits) == pytest.approx(ceiling)
    assert round_floor(-434.79, digits) == pytest.approx(floor)


def test_round_exact_values_are_unchanged() -> None:
    """Values already at the requested precision round to themselves."""
    assert round_ceiling(0.3, 1) == 0.3
    assert round_floor(0.3, 1) == 0.3
    assert round_ceiling(1200.0, 2) == 1200.0
    assert round_floor(1000.0, 1) == 1000.0


def test_round_floor_exact_example() -> None:
    """-434.788113 floors to -440 at two significant digits."""
    assert round_floor(-434.788113, 2) == pytest.approx(-440.0)


def test_round_zero() -> None:
    """Zero rounds to zero for any digit count."""
    for digits in range(0, 6):
        assert round_ceiling(0.0, digits) == 0.0
        assert round_floor(0.0, digits) == 0.0


def test_round_never_crosses_input() -> None:
    """Ceiling is never below the input and floor never above it."""
    for value in (8803.364, -434.79, 0.012345, 12.34567, 1.0e-7, 9.99e12):
        for digits in range(1, 8):
            assert round_ceiling(value, digits) >= value
            assert round_floor(value, digits) <= value


def test_round_converges_with_more_digits() -> None:
    """More digits never move the rounded value further from the input."""
    value = 8803.364
    previous_up = math.inf
    previous_down = -math.inf
    for digits in range(1, 8):
        up = round_ceiling(value, digits)
        down = round_floor(value, digits)
        assert value <= up <= previous_up
        assert previous_down <= down <= value
        previous_up, previous_down = up, down


def test_round_negative_digits_raise() -> None:
    """Negative digit counts raise InvalidDigits, a ValueError."""
    with pytest.raises(InvalidDigits):
        round_ceiling(1.0, -1)
    with pytest.raises(ValueError):
        round_floor(1.0, -1)


def test_round_non_finite_raises() -> None:
    """NaN and infinity cannot be rounded."""
    with pytest.raises(InvalidRange):
        round_ceiling(math.nan, 2)
    with pytest.raises(NiceAxesError):
        round_floor(math.inf, 2)


def test_log10_helpers_at_powers_of_ten() -> None:
    """floor_log10 and ceil_log10 are exact at and around powers of ten."""
    assert floor_log10(1000.0) == 3
    assert ceil_log10(1000.0) == 3
    assert floor_log10(999.999) == 2
    assert ceil_log10(1000.001) == 4
    assert floor_log10(0.001) == -3
    assert ceil_log10(0.0133) == -1


@pytest.mark.parametrize("digits", range(1, 16))
def test_round_brackets_value_at_high_digit_counts(digits: int) -> None:
    """floor <= value <= ceiling holds even when the quotient is large."""
    rng = random.Random(digits)
    values = [2.202862369998757, -853179502.0003246, 8803.364, 0.1 + 0.2]
    values += [rng.uniform(-1.0, 1.0) * 10.0 ** rng.randint(-12, 12) for _ in range(2000)]
    for value in values:
        assert round_floor(value, digits) <= value <= round_ceiling(value, digits)


def test_round_floor_keeps_real_fraction() -> None:
    """A fractional part far above float noise is not snapped away."""
    assert round_floor(2.202862369998757, 9) == pytest.approx(2.20286236)
    assert round_ceiling(2.202862369998757, 9) == pytest.approx(2.20286237)
