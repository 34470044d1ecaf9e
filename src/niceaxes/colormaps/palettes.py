"""Named color palettes.

Each palette is an immutable :class:`PaletteTable` tagged with a
:class:`PaletteFamily`. Viridis ships as packed ``0xRRGGBB`` integers; the rest
come from plotly's built-in color scales. All tables are decoded once at import.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from plotly.colors import cyclical, diverging, hex_to_rgb, qualitative, sequential, unlabel_rgb

from niceaxes.colormaps._viridis import VIRIDIS_PACKED


class PaletteFamily(Enum):
    """How a palette is meant to be read. Informational only."""
    CATEGORICAL = "categorical"
    CYCLIC = "cyclic"
    DIVERGENT = "divergent"
    LINEAR = "linear"


@dataclass(frozen=True)
class PaletteTable:
    name: str
    family: PaletteFamily
    colors: tuple[tuple[int, int, int], ...]


def decode_packed(values: Iterable[int]) -> tuple[tuple[int, int, int], ...]:
    """Split packed ``0xRRGGBB`` integers into ``(r, g, b)`` tuples."""
    return tuple(((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF) for v in values)


def _decode_plotly(colors: Sequence[str]) -> tuple[tuple[int, int, int], ...]:
    out = []
    for c in colors:
        rgb = hex_to_rgb(c) if c.startswith("#") else unlabel_rgb(c)
        out.append(tuple(int(round(float(x))) for x in rgb))
    return tuple(out)


_PALETTES: dict[str, PaletteTable] = {
    t.name: t
    for t in (
        PaletteTable("viridis", PaletteFamily.LINEAR, decode_packed(VIRIDIS_PACKED)),
        PaletteTable("plasma", PaletteFamily.LINEAR, _decode_plotly(sequential.Plasma)),
        PaletteTable("rdbu", PaletteFamily.DIVERGENT, _decode_plotly(diverging.RdBu)),
        PaletteTable("puor", PaletteFamily.DIVERGENT, _decode_plotly(diverging.PuOr)),
        PaletteTable("twilight", PaletteFamily.CYCLIC, _decode_plotly(cyclical.Twilight)),
        PaletteTable("plotly", PaletteFamily.CATEGORICAL, _decode_plotly(qualitative.Plotly)),
        PaletteTable("d3", PaletteFamily.CATEGORICAL, _decode_plotly(qualitative.D3)),
    )
}


def get_palette(name: str) -> PaletteTable:
    """Look up a palette by case-insensitive name.

    Raises:
        KeyError: If no palette has that name.
    """
    try:
        return _PALETTES[name.lower()]
    except KeyError:
        raise KeyError(f"unknown palette {name!r}; known: {', '.join(sorted(_PALETTES))}") from None


def list_palettes(family: Optional[PaletteFamily] = None) -> list[str]:
    """Sorted palette names, optionally restricted to one family."""
    return sorted(n for n, t in _PALETTES.items() if family is None or t.family is family)
