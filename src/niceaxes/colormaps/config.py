# src/niceaxes/colormaps/config.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RampConfig:
    """Declarative configuration for generated color ramps.

    Attributes:
        num_colors: Default number of stops for ramp constructors that take no
            explicit count.
        samples: Number of points used to sample a diverging Msh path before it
            is re-sampled at equal arc length. Raised to the requested stop
            count when that is larger.
        white_magnitude: Msh magnitude of the neutral midpoint inserted between
            two saturated endpoints whose hues are far apart.
    """

    num_colors: int = 256
    samples: int = 1024
    white_magnitude: float = 88.0

    def __post_init__(self) -> None:
        if self.num_colors < 2:
            raise ValueError(f"num_colors must be >= 2, got {self.num_colors}")
        if self.samples < 2:
            raise ValueError(f"samples must be >= 2, got {self.samples}")
        if self.white_magnitude <= 0:
            raise ValueError(f"white_magnitude must be > 0, got {self.white_magnitude}")
