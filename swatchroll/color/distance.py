# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
CIEDE2000 perceptual color difference.

Reference:
- G. Sharma, W. Wu, E. N. Dalal, "The CIEDE2000 Color-Difference Formula:
  Implementation Notes, Supplementary Test Data, and Mathematical
  Observations", Color Research & Application, 2005.

Unity weighting (kL = kC = kH = 1). Inputs are CIELAB on the 0-100 scale.

Reference thresholds (ΔE00):
- ΔE ≈ 1: just noticeable difference
- ΔE ≈ 2-5: perceptible at a glance
- ΔE ≈ 10+: clearly different paint colors
"""

from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from swatchroll.color.colorspace import lab_to_lch

if TYPE_CHECKING:
    from swatchroll.schema import ColorEntity


_POW25_7 = 25.0 ** 7


def _ciede2000(lab1: NDArray[np.float64], lab2: NDArray[np.float64]) -> NDArray[np.float64]:
    """Broadcasting CIEDE2000 over (..., 3) arrays."""
    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # Chroma correction
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar7 / (C_bar7 + _POW25_7)))

    a1p = a1 * (1.0 + G)
    a2p = a2 * (1.0 + G)
    C1p = np.hypot(a1p, b1)
    C2p = np.hypot(a2p, b2)
    h1p = np.degrees(np.arctan2(b1, a1p)) % 360.0
    h2p = np.degrees(np.arctan2(b2, a2p)) % 360.0

    chroma_product = C1p * C2p
    achromatic = chroma_product == 0.0

    # Differences
    dL = L2 - L1
    dC = C2p - C1p

    dh = h2p - h1p
    dh = np.where(dh > 180.0, dh - 360.0, dh)
    dh = np.where(dh < -180.0, dh + 360.0, dh)
    dh = np.where(achromatic, 0.0, dh)
    dH = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dh) / 2.0)

    # Means
    L_bar = (L1 + L2) / 2.0
    C_bar_p = (C1p + C2p) / 2.0

    h_sum = h1p + h2p
    h_bar = np.where(
        np.abs(h1p - h2p) <= 180.0,
        h_sum / 2.0,
        np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
    )
    h_bar = np.where(achromatic, h_sum, h_bar)

    # Weighting functions
    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar))
        + 0.32 * np.cos(np.radians(3.0 * h_bar + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar - 63.0))
    )
    d_theta = 30.0 * np.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    C_bar_p7 = C_bar_p ** 7
    R_C = 2.0 * np.sqrt(C_bar_p7 / (C_bar_p7 + _POW25_7))
    L_offset = (L_bar - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_offset) / np.sqrt(20.0 + L_offset)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T
    R_T = -np.sin(np.radians(2.0 * d_theta)) * R_C

    tL = dL / S_L
    tC = dC / S_C
    tH = dH / S_H

    return np.sqrt(np.maximum(tL**2 + tC**2 + tH**2 + R_T * tC * tH, 0.0))


def delta_e_2000(lab1: ArrayLike, lab2: ArrayLike) -> float:
    """
    CIEDE2000 difference between two CIELAB colors.

    Symmetric in its arguments and zero only for identical inputs.

    Args:
        lab1: (L, a, b) of the first color
        lab2: (L, a, b) of the second color

    Returns:
        ΔE00 (lower = more similar)
    """
    return float(_ciede2000(
        np.asarray(lab1, dtype=np.float64),
        np.asarray(lab2, dtype=np.float64),
    ))


def delta_e_2000_batch(target: ArrayLike, labs: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized CIEDE2000 from one target to many colors.

    Args:
        target: (L, a, b) of the reference color
        labs: Array of shape (N, 3) with CIELAB values

    Returns:
        Array of shape (N,) with ΔE00 values
    """
    labs = np.asarray(labs, dtype=np.float64).reshape(-1, 3)
    target = np.broadcast_to(np.asarray(target, dtype=np.float64), labs.shape)
    return _ciede2000(target, labs)


# =============================================================================
# Nearest-neighbor queries over swatches
# =============================================================================


def _labs_of(entities: Sequence[ColorEntity]) -> NDArray[np.float64]:
    return np.array([e.lab for e in entities], dtype=np.float64).reshape(-1, 3)


def nearest_by_delta_e(
    target: ArrayLike,
    entities: Sequence[ColorEntity],
) -> Optional[ColorEntity]:
    """The single swatch closest to ``target``, or None for an empty sequence."""
    if not entities:
        return None
    distances = delta_e_2000_batch(target, _labs_of(entities))
    return entities[int(np.argmin(distances))]


def nearest_by_delta_e_multiple(
    target: ArrayLike,
    entities: Sequence[ColorEntity],
    count: int = 5,
) -> list[ColorEntity]:
    """The ``count`` swatches closest to ``target``, closest first."""
    if not entities:
        return []
    distances = delta_e_2000_batch(target, _labs_of(entities))
    order = np.argsort(distances, kind="stable")[:count]
    return [entities[i] for i in order]


def hue_distance(h1: ArrayLike, h2: ArrayLike) -> NDArray[np.float64]:
    """Unsigned angular distance in degrees, [0, 180]."""
    diff = np.abs(np.asarray(h1, dtype=np.float64) - np.asarray(h2, dtype=np.float64)) % 360.0
    return np.where(diff > 180.0, 360.0 - diff, diff)


def nearest_by_delta_e_hue_window(
    target: ArrayLike,
    entities: Sequence[ColorEntity],
    count: int = 5,
    window: float = 90.0,
) -> list[ColorEntity]:
    """
    Closest swatches, searching only within ±``window`` degrees of hue first.

    The hue window is a pruning step: if it leaves fewer than ``2 * count``
    swatches, the whole sequence is ranked instead.
    """
    if not entities:
        return []

    target_hue = float(lab_to_lch(target)[2])
    hues = np.array([e.lch[2] for e in entities], dtype=np.float64)
    in_window = np.flatnonzero(hue_distance(hues, target_hue) <= window)

    if len(in_window) >= count * 2:
        pool = [entities[i] for i in in_window]
    else:
        pool = list(entities)

    return nearest_by_delta_e_multiple(target, pool, count=count)
