"""Color ramps and the value-to-color map built on top of them.

A :class:`ColorRamp` is an immutable sequence of :class:`ColorStop` objects at
strictly increasing positions from 0 to 1. :class:`ScaledColorMap` pins a ramp
to a data interval and answers "which color is this value".
"""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence

from plotly.colors import label_rgb

from niceaxes.colormaps.config import RampConfig
from niceaxes.colormaps.palettes import decode_packed, get_palette
from niceaxes.errors import ColorInterpolationError, InvalidRange
from niceaxes.utils.logging import get_logger

logger = get_logger(__name__)

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)


def check_rgb(color: Sequence[int]) -> RGB:
    """Validate an 8-bit RGB triple and return it as a tuple of ints."""
    if len(color) != 3:
        raise ColorInterpolationError(f"color must have 3 channels, got {tuple(color)}")
    rgb = tuple(int(c) for c in color)
    if any(c != orig for c, orig in zip(rgb, color)) or any(not 0 <= c <= 255 for c in rgb):
        raise ColorInterpolationError(f"color channels must be integers in [0, 255], got {tuple(color)}")
    return rgb  # type: ignore[return-value]


@dataclass(frozen=True)
class ColorStop:
    """A color pinned to a position in [0, 1] along a ramp."""

    position: float
    color: RGB

    def __post_init__(self) -> None:
        if not 0.0 <= self.position <= 1.0:
            raise ColorInterpolationError(f"stop position must be in [0, 1], got {self.position}")
        object.__setattr__(self, "color", check_rgb(self.color))


@dataclass(frozen=True)
class ColorRamp:
    """Ordered color stops from position 0 to position 1.

    Attributes:
        stops: At least two stops; positions strictly increase from exactly 0
            to exactly 1.
    """

    stops: tuple[ColorStop, ...]

    def __post_init__(self) -> None:
        stops = tuple(self.stops)
        if len(stops) < 2:
            raise ColorInterpolationError(f"a color ramp needs at least 2 stops, got {len(stops)}")
        if stops[0].position != 0.0 or stops[-1].position != 1.0:
            raise ColorInterpolationError("color ramp stops must start at 0 and end at 1")
        for a, b in zip(stops, stops[1:]):
            if b.position <= a.position:
                raise ColorInterpolationError(
                    f"stop positions must be strictly increasing ({a.position} then {b.position})"
                )
        object.__setattr__(self, "stops", stops)

    @classmethod
    def from_colors(cls, colors: Iterable[Sequence[int]]) -> "ColorRamp":
        """Build a ramp with ``colors`` at evenly spaced positions ``i / (n - 1)``."""
        colors = list(colors)
        n = len(colors)
        if n < 2:
            raise ColorInterpolationError(f"a color ramp needs at least 2 colors, got {n}")
        return cls(
            tuple(
                ColorStop(1.0 if i == n - 1 else i / (n - 1), tuple(c))
                for i, c in enumerate(colors)
            )
        )

    def __len__(self) -> int:
        return len(self.stops)

    @property
    def colors(self) -> tuple[RGB, ...]:
        return tuple(s.color for s in self.stops)

    @property
    def positions(self) -> tuple[float, ...]:
        return tuple(s.position for s in self.stops)

    def reversed(self) -> "ColorRamp":
        """Same positions, colors in reverse order."""
        return ColorRamp(
            tuple(ColorStop(s.position, c) for s, c in zip(self.stops, reversed(self.colors)))
        )

    def color_at(self, fraction: float) -> RGB:
        """Color of the bin containing ``fraction``.

        The unit interval is split into ``len(self)`` equal bins; ``fraction``
        outside [0, 1] is clamped.
        """
        n = len(self.stops)
        fraction = min(max(fraction, 0.0), 1.0)
        return self.stops[min(int(fraction * n), n - 1)].color

    def to_plotly_colorscale(self) -> list[list]:
        """Return ``[[position, "rgb(r, g, b)"], ...]`` for plotly's ``colorscale``."""
        return [[s.position, label_rgb(s.color)] for s in self.stops]


@dataclass(frozen=True)
class ScaledColorMap:
    """Map data values in ``[vmin, vmax]`` onto a :class:`ColorRamp`.

    Attributes:
        ramp: Colors to map onto.
        vmin: Data value mapped to the start of the ramp.
        vmax: Data value mapped to the end of the ramp.
        limit_colors: When True, values below ``vmin`` are black and values
            above ``vmax`` are white. Otherwise they clamp to the end colors.
        title: Free-form label, typically shown beside a color bar.
    """

    ramp: ColorRamp
    vmin: float
    vmax: float
    limit_colors: bool = False
    title: str = ""

    def __post_init__(self) -> None:
        if not (math.isfinite(self.vmin) and math.isfinite(self.vmax)):
            raise InvalidRange(f"color map range must be finite, got [{self.vmin}, {self.vmax}]")
        if self.vmin >= self.vmax:
            raise InvalidRange(f"color map vmin {self.vmin} must be less than vmax {self.vmax}")

    def color_for(self, value: float) -> Optional[RGB]:
        """Color for ``value``, or ``None`` (transparent) when it is not finite."""
        if not math.isfinite(value):
            return None
        frac = (value - self.vmin) / (self.vmax - self.vmin)
        if frac < 0:
            if self.limit_colors:
                return BLACK
            frac = 0.0
        if frac > 1:
            if self.limit_colors:
                return WHITE
            frac = 1.0
        return self.ramp.color_at(frac)

    def with_limit_colors(self, enabled: bool = True) -> "ScaledColorMap":
        return replace(self, limit_colors=enabled)

    def with_title(self, title: str) -> "ScaledColorMap":
        return replace(self, title=title)

    def reversed(self) -> "ScaledColorMap":
        return replace(self, ramp=self.ramp.reversed())


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def _count(n: Optional[int]) -> int:
    return RampConfig().num_colors if n is None else n


def linear_ramp(min_color: Sequence[int], max_color: Sequence[int], n: Optional[int] = None) -> ColorRamp:
    """Straight line between two colors in sRGB, channels truncated to integers."""
    n = _count(n)
    if n < 2:
        raise ColorInterpolationError(f"n must be >= 2, got {n}")
    lo = check_rgb(min_color)
    hi = check_rgb(max_color)
    colors = []
    for i in range(n):
        frac = i / (n - 1)
        colors.append(tuple(int(a + frac * (b - a)) for a, b in zip(lo, hi)))
    return ColorRamp.from_colors(colors)


def bilinear_ramp(
    min_color: Sequence[int],
    mid_color: Sequence[int],
    max_color: Sequence[int],
    n: Optional[int] = None,
) -> ColorRamp:
    """Two linear ramps joined at ``mid_color``; each half has about ``n / 2`` colors."""
    n = _count(n)
    if n < 4:
        raise ColorInterpolationError(f"a bilinear ramp needs n >= 4, got {n}")
    half = n // 2
    lower = linear_ramp(min_color, mid_color, half).colors
    upper = linear_ramp(mid_color, max_color, n - half).colors
    return ColorRamp.from_colors(lower + upper)


def greyscale_ramp(n: Optional[int] = None) -> ColorRamp:
    """Black to white."""
    return linear_ramp(BLACK, WHITE, n)


def _hsb(hue: float) -> RGB:
    r, g, b = colorsys.hsv_to_rgb(hue % 1.0, 1.0, 1.0)
    return (int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))


def hue_ramp(n: Optional[int] = None) -> ColorRamp:
    """Full-saturation hue wheel from red back round to red."""
    n = _count(n)
    if n < 2:
        raise ColorInterpolationError(f"n must be >= 2, got {n}")
    return ColorRamp.from_colors(_hsb(i / (n - 1)) for i in range(n))


def spectrum_ramp(n: Optional[int] = None) -> ColorRamp:
    """Full-saturation hues from blue through green and yellow to red."""
    n = _count(n)
    if n < 2:
        raise ColorInterpolationError(f"n must be >= 2, got {n}")
    return ColorRamp.from_colors(_hsb(2.0 / 3.0 * (1.0 - i / (n - 1))) for i in range(n))


def divergent_ramp(
    min_color: Sequence[int],
    max_color: Sequence[int],
    n: Optional[int] = None,
    *,
    config: Optional[RampConfig] = None,
) -> ColorRamp:
    """Perceptually even diverging ramp, see :func:`~niceaxes.colormaps.divergent.generate_color_map`."""
    from niceaxes.colormaps.divergent import generate_color_map

    cfg = config or RampConfig()
    return generate_color_map(min_color, max_color, cfg.num_colors if n is None else n, config=cfg)


def ramp_from_packed(values: Iterable[int]) -> ColorRamp:
    """Ramp from packed ``0xRRGGBB`` integers."""
    return ColorRamp.from_colors(decode_packed(values))


def ramp_from_palette(name: str) -> ColorRamp:
    """Ramp through the colors of a named palette, in table order."""
    palette = get_palette(name)
    logger.debug("ramp from palette %s (%d colors)", palette.name, len(palette.colors))
    return ColorRamp.from_colors(palette.colors)
