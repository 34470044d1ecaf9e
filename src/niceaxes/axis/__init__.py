"""Numeric axis calibration: rounding, clean ranges, ticks and labels."""

from niceaxes.axis.axis_range import AxisRange, get_linear_axis, get_log_axis
from niceaxes.axis.config import Scale, TickConfig
from niceaxes.axis.labels import fixed_format, label_ticks
from niceaxes.axis.rounding import round_ceiling, round_floor
from niceaxes.axis.ticks import TickSet, compute_ticks

__all__ = [
    "AxisRange",
    "Scale",
    "TickConfig",
    "TickSet",
    "compute_ticks",
    "fixed_format",
    "get_linear_axis",
    "get_log_axis",
    "label_ticks",
    "round_ceiling",
    "round_floor",
]
