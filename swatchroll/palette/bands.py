# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Per-slot LRV bands.

Palettes read lightest to darkest by slot index (slot 0 = lightest). A
locked swatch pins that ordering: every slot before it must be at least
as light, every slot after it at most as light.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike


def catalog_lrv_range(lrvs: ArrayLike) -> tuple[float, float]:
    """Observed (min, max) LRV; ``(100.0, 0.0)`` when there are none."""
    lrvs = np.asarray(lrvs, dtype=np.float64)
    if lrvs.size == 0:
        return 100.0, 0.0
    return float(lrvs.min()), float(lrvs.max())


def solve_lrv_bands(
    locked_lrvs: Sequence[Optional[float]],
    lrv_range: tuple[float, float],
) -> list[tuple[float, float]]:
    """
    Compute the permissible (min, max) LRV for every slot.

    Each slot starts with the catalog-wide range. For every locked slot j
    with LRV v, slots before j get ``min = max(min, v)`` and slots after j
    get ``max = min(max, v)``. One pass resolves all constraints because
    locks never move and the updates are monotone.

    Conflicting locks (a darker lock placed before a lighter one) can
    leave a slot with ``min > max``; such a slot is only reachable through
    tolerance widening.

    Args:
        locked_lrvs: LRV per slot, None where the slot is not locked
        lrv_range: Catalog-wide (min, max) LRV

    Returns:
        List of (min, max) per slot
    """
    size = len(locked_lrvs)
    lows = np.full(size, lrv_range[0], dtype=np.float64)
    highs = np.full(size, lrv_range[1], dtype=np.float64)

    for j, v in enumerate(locked_lrvs):
        if v is None:
            continue
        lows[:j] = np.maximum(lows[:j], v)
        highs[j + 1:] = np.minimum(highs[j + 1:], v)

    return [(float(lo), float(hi)) for lo, hi in zip(lows, highs)]
