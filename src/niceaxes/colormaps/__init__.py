"""Color ramps: diverging Moreland ramps, simple constructors and named palettes."""

from niceaxes.colormaps.config import RampConfig
from niceaxes.colormaps.color_space import delta_e, local_delta_e
from niceaxes.colormaps.divergent import estimate_end_color, generate_color_map
from niceaxes.colormaps.palettes import PaletteFamily, PaletteTable, get_palette, list_palettes
from niceaxes.colormaps.ramp import (
    ColorRamp,
    ColorStop,
    ScaledColorMap,
    bilinear_ramp,
    divergent_ramp,
    greyscale_ramp,
    hue_ramp,
    linear_ramp,
    ramp_from_packed,
    ramp_from_palette,
    spectrum_ramp,
)

__all__ = [
    "ColorRamp",
    "ColorStop",
    "PaletteFamily",
    "PaletteTable",
    "RampConfig",
    "ScaledColorMap",
    "bilinear_ramp",
    "delta_e",
    "divergent_ramp",
    "estimate_end_color",
    "generate_color_map",
    "get_palette",
    "greyscale_ramp",
    "hue_ramp",
    "linear_ramp",
    "list_palettes",
    "local_delta_e",
    "ramp_from_packed",
    "ramp_from_palette",
    "spectrum_ramp",
]
