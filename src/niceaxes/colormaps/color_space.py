"""Color space conversions used to build perceptual color ramps.

All functions accept array-like input with a trailing axis of length 3 and
return float ``numpy`` arrays of the same shape, so a single color and an
``(n, 3)`` stack of colors go through the same code path.

Spaces:

- sRGB: 8-bit channels in [0, 255].
- linear RGB: gamma-expanded channels scaled to [0, 100].
- XYZ: CIE 1931 tristimulus values, D65 white at Y = 100.
- Lab: CIE L*a*b* relative to the D65 white point.
- Msh: Moreland's polar form of Lab. ``M`` is the vector magnitude, ``s`` the
  angle from the L axis (saturation) and ``h`` the hue angle in the a-b plane.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

D65_WHITE = np.array([95.047, 100.0, 108.883])

_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787
_LAB_OFFSET = 16.0 / 116.0


def srgb_to_linear(rgb: ArrayLike) -> np.ndarray:
    v = np.asarray(rgb, dtype=float) / 255.0
    lin = np.where(v > 0.04045, ((np.maximum(v, 0.04045) + 0.055) / 1.055) ** 2.4, v / 12.92)
    return lin * 100.0


def linear_to_srgb(lin: ArrayLike) -> np.ndarray:
    v = np.asarray(lin, dtype=float) / 100.0
    srgb = np.where(
        v > 0.0031308,
        1.055 * np.maximum(v, 0.0031308) ** (1.0 / 2.4) - 0.055,
        12.92 * v,
    )
    return srgb * 255.0


def rgb_to_xyz(rgb: ArrayLike) -> np.ndarray:
    return srgb_to_linear(rgb) @ _RGB_TO_XYZ.T


def xyz_to_rgb(xyz: ArrayLike) -> np.ndarray:
    return linear_to_srgb(np.asarray(xyz, dtype=float) @ _XYZ_TO_RGB.T)


def _lab_f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _LAB_EPSILON, np.cbrt(t), _LAB_KAPPA * t + _LAB_OFFSET)


def _lab_f_inv(f: np.ndarray) -> np.ndarray:
    cube = f**3
    return np.where(cube > _LAB_EPSILON, cube, (f - _LAB_OFFSET) / _LAB_KAPPA)


def xyz_to_lab(xyz: ArrayLike) -> np.ndarray:
    f = _lab_f(np.asarray(xyz, dtype=float) / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_xyz(lab: ArrayLike) -> np.ndarray:
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0
    return _lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * D65_WHITE


def lab_to_msh(lab: ArrayLike) -> np.ndarray:
    """Lab to Msh. Black (``M == 0``) maps to ``s = 0``."""
    lab = np.asarray(lab, dtype=float)
    m = np.linalg.norm(lab, axis=-1)
    with np.errstate(divide="ignore", invalid="ignore"):
        cos_s = np.where(m > 0, lab[..., 0] / m, 1.0)
    s = np.arccos(np.clip(cos_s, -1.0, 1.0))
    h = np.arctan2(lab[..., 2], lab[..., 1])
    return np.stack([m, s, h], axis=-1)


def msh_to_lab(msh: ArrayLike) -> np.ndarray:
    msh = np.asarray(msh, dtype=float)
    m, s, h = msh[..., 0], msh[..., 1], msh[..., 2]
    return np.stack([m * np.cos(s), m * np.sin(s) * np.cos(h), m * np.sin(s) * np.sin(h)], axis=-1)


def rgb_to_lab(rgb: ArrayLike) -> np.ndarray:
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab: ArrayLike) -> np.ndarray:
    """Lab to unclamped sRGB. Out-of-gamut colors fall outside [0, 255]."""
    return xyz_to_rgb(lab_to_xyz(lab))


def rgb_to_msh(rgb: ArrayLike) -> np.ndarray:
    return lab_to_msh(rgb_to_lab(rgb))


def msh_to_rgb(msh: ArrayLike) -> np.ndarray:
    return lab_to_rgb(msh_to_lab(msh))


def delta_e(c1: ArrayLike, c2: ArrayLike):
    """CIE76 color difference between sRGB colors.

    Returns a float for two single colors, or an array for stacks of colors.
    """
    d = np.linalg.norm(rgb_to_lab(c1) - rgb_to_lab(c2), axis=-1)
    if np.ndim(d) == 0:
        return float(d)
    return d


def local_delta_e(colors: ArrayLike) -> np.ndarray:
    """CIE76 difference between each pair of adjacent colors in an ``(n, 3)`` stack."""
    lab = rgb_to_lab(colors)
    return np.linalg.norm(np.diff(lab, axis=0), axis=-1)
