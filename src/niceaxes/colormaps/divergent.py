"""Diverging color ramps after Moreland, "Diverging Color Maps for Scientific
Visualization" (2009).

The path between the two end colors is built in Msh space. When both ends are
saturated and their hues differ by more than 60 degrees, the path passes
through a neutral midpoint so the ramp reads as two halves meeting at
near-white. Hues of unsaturated points are spun toward their saturated partner
so the path does not swing through unrelated hues.

Interpolating linearly in Msh does not give evenly spaced perceptual steps, so
the path is sampled densely, measured in Lab (CIE76 deltaE) and re-sampled at
equal arc length.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from niceaxes.colormaps.color_space import lab_to_rgb, msh_to_rgb, rgb_to_lab, rgb_to_msh
from niceaxes.colormaps.config import RampConfig
from niceaxes.colormaps.ramp import ColorRamp, ColorStop, check_rgb
from niceaxes.errors import ColorInterpolationError
from niceaxes.utils.logging import get_logger

logger = get_logger(__name__)

# Below this Msh saturation a color counts as unsaturated.
_UNSATURATED = 0.05
_MAX_HUE_GAP = math.pi / 3.0


def adjust_hue(saturated: np.ndarray, unsaturated_magnitude: float) -> float:
    """Hue for an unsaturated color paired with a saturated one."""
    m, s, h = saturated
    if m >= unsaturated_magnitude:
        return float(h)
    spin = s * math.sqrt(unsaturated_magnitude**2 - m**2) / (m * math.sin(s))
    if h > -math.pi / 3.0:
        return float(h + spin)
    return float(h - spin)


def _interpolate(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    a = a.copy()
    b = b.copy()
    if a[1] < _UNSATURATED and b[1] > _UNSATURATED:
        a[2] = adjust_hue(b, a[0])
    elif b[1] < _UNSATURATED and a[1] > _UNSATURATED:
        b[2] = adjust_hue(a, b[0])
    t = t[:, np.newaxis]
    return (1.0 - t) * a + t * b


def msh_path(
    min_color: Sequence[int],
    max_color: Sequence[int],
    fractions: np.ndarray,
    white_magnitude: float = 88.0,
) -> np.ndarray:
    """Msh coordinates of the diverging path at each of ``fractions`` in [0, 1].

    Returns:
        Array of shape ``(len(fractions), 3)``.
    """
    msh1 = rgb_to_msh(min_color)
    msh2 = rgb_to_msh(max_color)
    fractions = np.asarray(fractions, dtype=float)

    diverging = (
        msh1[1] > _UNSATURATED
        and msh2[1] > _UNSATURATED
        and abs(msh1[2] - msh2[2]) > _MAX_HUE_GAP
    )
    if not diverging:
        return _interpolate(msh1, msh2, fractions)

    mid = np.array([max(msh1[0], msh2[0], white_magnitude), 0.0, 0.0])
    out = np.empty((fractions.size, 3))
    lower = fractions < 0.5
    out[lower] = _interpolate(msh1, mid, 2.0 * fractions[lower])
    out[~lower] = _interpolate(mid, msh2, 2.0 * fractions[~lower] - 1.0)
    return out


def _to_int_rgb(rgb: np.ndarray) -> np.ndarray:
    return np.rint(np.clip(rgb, 0.0, 255.0)).astype(int)


def generate_color_map(
    min_color: Sequence[int],
    max_color: Sequence[int],
    n: int,
    *,
    config: Optional[RampConfig] = None,
) -> ColorRamp:
    """Build an ``n``-stop diverging ramp from ``min_color`` to ``max_color``.

    Args:
        min_color: ``(r, g, b)`` integers in [0, 255], the color at position 0.
        max_color: ``(r, g, b)`` integers in [0, 255], the color at position 1.
        n: Number of stops, at least 2.
        config: Sampling density and neutral midpoint magnitude.

    Returns:
        ColorRamp with stops at ``i / (n - 1)``. The end stops are exactly
        ``min_color`` and ``max_color``; adjacent stops are roughly equally far
        apart in CIE76 deltaE.

    Raises:
        ColorInterpolationError: If ``n < 2`` or a color is not a valid 8-bit
            RGB triple.
    """
    if n < 2:
        raise ColorInterpolationError(f"a color map needs at least 2 colors, got n={n}")
    cfg = config or RampConfig()
    lo = check_rgb(min_color)
    hi = check_rgb(max_color)

    dense_t = np.linspace(0.0, 1.0, max(cfg.samples, n))
    dense_rgb = np.clip(msh_to_rgb(msh_path(lo, hi, dense_t, cfg.white_magnitude)), 0.0, 255.0)
    steps = np.linalg.norm(np.diff(rgb_to_lab(dense_rgb), axis=0), axis=-1)
    arc = np.concatenate([[0.0], np.cumsum(steps)])

    if arc[-1] <= 0.0:
        logger.debug("zero-length color path %s -> %s, spacing stops evenly", lo, hi)
        params = np.linspace(0.0, 1.0, n)
    else:
        params = np.interp(np.linspace(0.0, arc[-1], n), arc, dense_t)

    rgb = _to_int_rgb(msh_to_rgb(msh_path(lo, hi, params, cfg.white_magnitude)))
    colors = [tuple(int(c) for c in row) for row in rgb]
    colors[0] = lo
    colors[-1] = hi

    logger.debug("diverging ramp %s -> %s: %d stops, path length %.2f", lo, hi, n, arc[-1])
    return ColorRamp(
        tuple(
            ColorStop(1.0 if i == n - 1 else i / (n - 1), c)
            for i, c in enumerate(colors)
        )
    )


def estimate_end_color(start_color: Sequence[int]) -> tuple[int, int, int]:
    """Complementary end color: the Lab chroma rotated 90 degrees at equal lightness."""
    L, a, b = rgb_to_lab(check_rgb(start_color))
    rgb = _to_int_rgb(lab_to_rgb([L, -b, a]))
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]))
