# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex → sRGB → Linear RGB → XYZ (D65) → CIELAB → CIELCH

References:
- sRGB: IEC 61966-2-1
- CIELAB: CIE 15:2004, 2° observer, D65 reference white
- LRV: relative luminance scaled to 0-100

All conversions are pure NumPy and accept arrays of shape (..., 3), so the
same function converts one swatch or a whole catalog.
"""

from __future__ import annotations

import re
import threading
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray


# Neutral gray used when a swatch hex cannot be recovered at all
GRAY_SENTINEL_HEX = "E0E0E0"

_NON_HEX_RE = re.compile(r"[^0-9A-Fa-f]")


# =============================================================================
# Hex parsing
# =============================================================================


def normalize_hex(value: Optional[str]) -> str:
    """
    Normalize a user- or catalog-supplied hex string to ``RRGGBB``.

    Accepts ``#RGB``, ``#RRGGBB``, ``0xRRGGBB``, ``ARGB`` and ``AARRGGBB``
    forms as well as strings with stray characters. Never raises: anything
    unusable is padded with zeros. ``None`` yields the empty string.

    Examples:
        >>> normalize_hex("#fff")
        'FFFFFF'
        >>> normalize_hex("ff112233")
        '112233'
    """
    if value is None:
        return ""
    s = str(value).strip()

    if s.startswith("#"):
        s = s[1:]
    if s.lower().startswith("0x"):
        s = s[2:]

    s = _NON_HEX_RE.sub("", s)

    # Leading alpha channel
    if len(s) == 8:
        s = s[2:]
    if len(s) == 4:
        s = "".join(c * 2 for c in s[1:])

    if len(s) == 3:
        s = "".join(c * 2 for c in s)

    if len(s) > 6:
        s = s[-6:]

    return s.rjust(6, "0").upper()


def hex_to_rgb(hex_color: Optional[str]) -> tuple[int, int, int]:
    """
    Convert a hex string to an ``(r, g, b)`` tuple of 0-255 integers.

    Unparsable input returns black ``(0, 0, 0)``.
    """
    norm = normalize_hex(hex_color)
    try:
        value = int(norm, 16)
    except ValueError:
        return (0, 0, 0)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgb_to_hex(rgb: ArrayLike) -> str:
    """Format 0-255 RGB channels as ``RRGGBB`` (channels are clipped)."""
    r, g, b = np.clip(np.round(np.asarray(rgb, dtype=np.float64)), 0, 255).astype(int)
    return f"{r:02X}{g:02X}{b:02X}"


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# RGB → XYZ → CIELAB
# =============================================================================

# Linear sRGB to XYZ, observer 2°, illuminant D65
_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
], dtype=np.float64)

# D65 reference white, Y normalized to 100
_D65_WHITE = np.array([95.047, 100.000, 108.883], dtype=np.float64)

_LAB_EPSILON = 0.008856


def rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert 0-255 sRGB channels to CIE XYZ (Y of white = 100).

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    linear = srgb_to_linear(rgb / 255.0) * 100.0
    return np.einsum("...j,ij->...i", linear, _RGB_TO_XYZ)


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(
        t > _LAB_EPSILON,
        np.cbrt(t),
        7.787 * t + 16.0 / 116.0,
    )


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIELAB relative to D65.

    Args:
        xyz: Array of shape (..., 3) with XYZ values (white Y = 100)

    Returns:
        Array of shape (..., 3) with (L*, a*, b*)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / _D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def rgb_to_lab(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert 0-255 sRGB to CIELAB (full chain)."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def hex_to_lab(hex_color: Optional[str]) -> tuple[float, float, float]:
    """Convert a hex string to an ``(L, a, b)`` tuple."""
    L, a, b = rgb_to_lab(hex_to_rgb(hex_color))
    return float(L), float(a), float(b)


# =============================================================================
# CIELAB ↔ CIELCH
# =============================================================================


def lab_to_lch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELAB to CIELCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with (L, a, b)

    Returns:
        Array of shape (..., 3) with (L, C, H); H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIELCH to CIELAB.

    Args:
        lch: Array of shape (..., 3) with (L, C, H), H in degrees

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def process_color(hex_color: Optional[str]) -> dict:
    """
    Derive every stored representation of a catalog hex.

    Returns:
        Dict with ``rgb`` (3 ints), ``lab`` and ``lch`` (3 floats each)
    """
    rgb = hex_to_rgb(hex_color)
    lab = rgb_to_lab(rgb)
    lch = lab_to_lch(lab)
    return {
        "rgb": list(rgb),
        "lab": [float(v) for v in lab],
        "lch": [float(v) for v in lch],
    }


# =============================================================================
# Light Reflectance Value
# =============================================================================

# Rec. 709 luminance coefficients
_LUMINANCE = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def compute_lrv(rgb: ArrayLike) -> NDArray[np.float64] | float:
    """
    Light Reflectance Value from 0-255 sRGB channels.

    LRV = clamp(100 * Y, 0, 100) where Y is relative luminance of the
    linearized channels. Accepts (..., 3) arrays; scalars come back as float.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    y = srgb_to_linear(rgb / 255.0) @ _LUMINANCE
    lrv = np.clip(y * 100.0, 0.0, 100.0)
    if lrv.ndim == 0:
        return float(lrv)
    return lrv


class LrvCache:
    """
    Memoized LRV lookup keyed by normalized hex.

    Append-only and never evicted; bounded in practice by the number of
    distinct hexes ever seen. Safe to share between threads.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = {}
        self._lock = threading.Lock()

    def get(self, hex_color: Optional[str]) -> float:
        """LRV for ``hex_color``, computing and storing it on first lookup."""
        key = normalize_hex(hex_color)
        with self._lock:
            cached = self._values.get(key)
        if cached is not None:
            return cached

        lrv = compute_lrv(hex_to_rgb(key))
        with self._lock:
            return self._values.setdefault(key, lrv)

    def __contains__(self, hex_color: object) -> bool:
        if not isinstance(hex_color, str):
            return False
        with self._lock:
            return normalize_hex(hex_color) in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


# Process-wide cache used when no cache is injected
DEFAULT_LRV_CACHE = LrvCache()


def lrv_for_hex(hex_color: Optional[str], cache: Optional[LrvCache] = None) -> float:
    """LRV (0-100) for a hex string, memoized in ``cache`` (default: process-wide)."""
    return (cache if cache is not None else DEFAULT_LRV_CACHE).get(hex_color)


def lrv_for_swatch(
    measured_lrv: Optional[float] = None,
    hex_color: Optional[str] = None,
    cache: Optional[LrvCache] = None,
) -> float:
    """
    Resolve a swatch's LRV.

    A positive manufacturer-measured LRV wins (clamped to 0-100); otherwise
    it is derived from the hex. With neither available, returns 0.0.
    """
    if measured_lrv is not None and measured_lrv > 0:
        return float(min(max(measured_lrv, 0.0), 100.0))
    if hex_color:
        return lrv_for_hex(hex_color, cache)
    return 0.0
