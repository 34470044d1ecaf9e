"""
niceaxes: axis calibration and color ramps for scientific plots.

This package provides:
- Significant-digit rounding and clean linear/log axis ranges
- Major and minor tick positions for numeric axes
- Calendar-aware time ticks with compact labels
- Perceptually even diverging color ramps and named palettes
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from niceaxes.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library (imported by other applications), logging is
automatically handled by the parent application's configuration.
"""

import logging

from niceaxes.utils.logging import configure_logging, get_logger

from niceaxes.axis import AxisRange, Scale, TickConfig, TickSet, compute_ticks, get_linear_axis, get_log_axis
from niceaxes.calendar_axis import CalendarTickSet, J2000Converter, generate_calendar_ticks
from niceaxes.colormaps import ColorRamp, PaletteTable, generate_color_map, get_palette
from niceaxes.errors import (
    ColorInterpolationError,
    InvalidDigits,
    InvalidRange,
    NiceAxesError,
    TimeConversionError,
)

# Ensure niceaxes logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("niceaxes")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "AxisRange",
    "CalendarTickSet",
    "ColorInterpolationError",
    "ColorRamp",
    "InvalidDigits",
    "InvalidRange",
    "J2000Converter",
    "NiceAxesError",
    "PaletteTable",
    "Scale",
    "TickConfig",
    "TickSet",
    "TimeConversionError",
    "compute_ticks",
    "configure_logging",
    "generate_calendar_ticks",
    "generate_color_map",
    "get_linear_axis",
    "get_log_axis",
    "get_logger",
    "get_palette",
]

__version__ = "0.1.0"
