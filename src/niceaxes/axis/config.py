# src/niceaxes/axis/config.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Scale(Enum):
    """Axis scale."""
    LINEAR = "linear"
    LOG = "log"


@dataclass(frozen=True)
class TickConfig:
    """Declarative configuration for numeric tick generation.

    Attributes:
        min_major: Lower end of the target band for the number of major ticks
            on a linear axis.
        max_major: Upper end of the target band. The chosen step is the
            smallest 1-2-5 step that produces at most this many major ticks.
    """

    min_major: int = 4
    max_major: int = 10

    def __post_init__(self) -> None:
        if self.min_major < 1:
            raise ValueError(f"min_major must be >= 1, got {self.min_major}")
        if self.max_major < self.min_major:
            raise ValueError(
                f"max_major ({self.max_major}) must be >= min_major ({self.min_major})"
            )


@dataclass(frozen=True)
class CalendarConfig:
    """Declarative configuration for calendar tick generation.

    Attributes:
        max_ratio: A candidate step is rejected when its estimated number of
            major ticks exceeds ``max_ratio * target``.
    """

    max_ratio: float = 2.0

    def __post_init__(self) -> None:
        if self.max_ratio < 1.0:
            raise ValueError(f"max_ratio must be >= 1.0, got {self.max_ratio}")
