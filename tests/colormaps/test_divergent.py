"""Unit tests for Moreland diverging color maps."""

from __future__ import annotations

import numpy as np
import pytest

from niceaxes.colormaps import RampConfig, estimate_end_color, generate_color_map
from niceaxes.colormaps.color_space import local_delta_e, rgb_to_lab
from niceaxes.errors import ColorInterpolationError

BLUE = (59, 76, 192)
RED = (180, 4, 38)


def test_cool_warm_33_stops() -> None:
    """33 stops keep exact endpoints and evenly spaced positions."""
    ramp = generate_color_map(BLUE, RED, 33)
    assert len(ramp) == 33
    assert ramp.colors[0] == BLUE
    assert ramp.colors[-1] == RED
    assert ramp.positions == pytest.approx([i / 32 for i in range(33)])
    for color in ramp.colors:
        assert all(isinstance(c, int) and 0 <= c <= 255 for c in color)


def test_cool_warm_uniform_delta_e() -> None:
    """The largest adjacent deltaE is at most 1.5 times the mean."""
    steps = local_delta_e(generate_color_map(BLUE, RED, 33).colors)
    assert steps.max() <= 1.5 * steps.mean()


def test_cool_warm_passes_near_white() -> None:
    """Saturated endpoints with distant hues meet at a light neutral midpoint."""
    ramp = generate_color_map(BLUE, RED, 33)
    lightness = rgb_to_lab(ramp.colors)[:, 0]
    assert lightness.max() > 75.0
    assert 10 <= int(np.argmax(lightness)) <= 22


def test_generation_is_deterministic() -> None:
    """Identical inputs give identical ramps."""
    assert generate_color_map(BLUE, RED, 17) == generate_color_map(BLUE, RED, 17)


def test_two_stops_are_the_endpoints() -> None:
    """n == 2 returns just the two input colors."""
    assert generate_color_map(BLUE, RED, 2).colors == (BLUE, RED)


def test_same_color_ramp() -> None:
    """A zero-length path repeats the single color."""
    ramp = generate_color_map((90, 90, 90), (90, 90, 90), 5)
    assert ramp.colors == ((90, 90, 90),) * 5


def test_unsaturated_endpoint() -> None:
    """A grey endpoint takes the hue of the saturated one without a white midpoint."""
    ramp = generate_color_map((255, 255, 255), RED, 9)
    lightness = rgb_to_lab(ramp.colors)[:, 0]
    assert all(a > b for a, b in zip(lightness, lightness[1:]))


def test_custom_config() -> None:
    """Sampling density is configurable and still yields exact endpoints."""
    ramp = generate_color_map(BLUE, RED, 9, config=RampConfig(samples=64))
    assert ramp.colors[0] == BLUE
    assert ramp.colors[-1] == RED


def test_invalid_requests() -> None:
    """Fewer than two stops or bad colors raise ColorInterpolationError."""
    with pytest.raises(ColorInterpolationError):
        generate_color_map(BLUE, RED, 1)
    with pytest.raises(ColorInterpolationError):
        generate_color_map((256, 0, 0), RED, 5)
    with pytest.raises(ValueError):
        generate_color_map(BLUE, (1, 2), 5)


def test_estimate_end_color() -> None:
    """The complementary end of a blue is warm, and a grey maps to itself."""
    r, g, b = estimate_end_color(BLUE)
    assert r > b
    assert estimate_end_color((128, 128, 128)) == (128, 128, 128)
