# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Harmony targets.

A seed color and a harmony mode produce five canonical CIELAB targets,
which are then stretched or compressed to the requested palette size.

Every mode works in CIELCH:
- neutral:       tonal ramp around the seed, chroma pulled down
- analogous:     hue steps of 30° (±60° overall)
- complementary: seed hue, its opposite, and the perpendicular midpoint
- triad:         hues 120° apart plus a 60° accent
- designer:      fixed lightness bands per role, lightest first
"""

from __future__ import annotations

import math
from typing import Callable, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from swatchroll.color.colorspace import lab_to_lch, lch_to_lab
from swatchroll.schema import HarmonyMode


CANONICAL_TARGET_COUNT = 5
MAX_PALETTE_SIZE = 9

# Floor applied to every target chroma so no target collapses to gray
MIN_TARGET_CHROMA = 5.0

# Designer roles, lightest first: Whisper, Dominant, Bridge, Secondary, Anchor
DESIGNER_LIGHTNESS = (83.0, 65.0, 57.0, 42.0, 12.0)
DESIGNER_HUE_SHIFTS = (15.0, 0.0, 170.0, 30.0, 0.0)
DESIGNER_CHROMA_MULTIPLIERS = (0.3, 0.7, 0.4, 0.9, 0.8)

_STEPS = np.arange(CANONICAL_TARGET_COUNT, dtype=np.float64)
_CENTERED = _STEPS - 2.0
_ALTERNATING = _STEPS % 2

_Components = tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]


def _neutral(L: float, C: float, H: float) -> _Components:
    lightness = np.array([
        max(20.0, L - 30.0),
        max(10.0, L - 15.0),
        L,
        min(90.0, L + 15.0),
        min(95.0, L + 30.0),
    ])
    lightness = np.clip(lightness, 10.0, 95.0)
    chroma = C * (0.3 + 0.1 * _STEPS)
    hue = H + _CENTERED * 10.0
    return lightness, chroma, hue


def _analogous(L: float, C: float, H: float) -> _Components:
    return L + _CENTERED * 10.0, C * (0.7 + 0.1 * _STEPS), H + _CENTERED * 30.0


def _complementary(L: float, C: float, H: float) -> _Components:
    hue = np.array([H, H, H + 180.0, H + 180.0, H + 90.0])
    return L + _CENTERED * 8.0, C * (0.8 + 0.1 * _ALTERNATING), hue


def _triad(L: float, C: float, H: float) -> _Components:
    hue = np.array([H, H + 120.0, H + 240.0, H, H + 60.0])
    return L + _CENTERED * 8.0, C * (0.7 + 0.15 * _ALTERNATING), hue


_MODE_BUILDERS: dict[HarmonyMode, Callable[[float, float, float], _Components]] = {
    HarmonyMode.NEUTRAL: _neutral,
    HarmonyMode.ANALOGOUS: _analogous,
    HarmonyMode.COMPLEMENTARY: _complementary,
    HarmonyMode.TRIAD: _triad,
}


def generate_harmony_targets(
    seed_lab: ArrayLike,
    mode: Union[HarmonyMode, str],
    hue_offset: float = 0.0,
    lightness_offset: float = 0.0,
) -> NDArray[np.float64]:
    """
    Build the five canonical CIELAB targets for a harmony mode.

    The random offsets shift the seed's hue and lightness so repeated
    rolls from the same seed land on different targets. Designer mode
    ignores both: its lightness bands are absolute and its hues follow
    the seed directly.

    Args:
        seed_lab: (L, a, b) of the seed swatch
        mode: Harmony mode (enum or its string value)
        hue_offset: Degrees added to the seed hue
        lightness_offset: L* units added to the seed lightness

    Returns:
        Array of shape (5, 3) with CIELAB targets
    """
    mode = HarmonyMode(mode)
    L, C, H = (float(v) for v in lab_to_lch(seed_lab))

    if mode is HarmonyMode.DESIGNER:
        lightness = np.array(DESIGNER_LIGHTNESS)
        chroma = C * np.array(DESIGNER_CHROMA_MULTIPLIERS)
        hue = H + np.array(DESIGNER_HUE_SHIFTS)
    else:
        lightness, chroma, hue = _MODE_BUILDERS[mode](
            L + lightness_offset, C, H + hue_offset,
        )

    lch = np.stack([
        np.clip(lightness, 0.0, 100.0),
        np.maximum(chroma, MIN_TARGET_CHROMA),
        hue % 360.0,
    ], axis=-1)
    return lch_to_lab(lch)


def remap_targets(targets: ArrayLike, size: int) -> NDArray[np.float64]:
    """
    Stretch or compress the canonical targets to ``size`` slots.

    - 1 slot: the middle target
    - 2 slots: the first and last targets
    - otherwise: evenly spaced picks (with repetition above 5 slots)

    Args:
        targets: Array of shape (5, 3)
        size: Palette size, 1-9

    Returns:
        Array of shape (size, 3)
    """
    targets = np.asarray(targets, dtype=np.float64)
    if not 1 <= size <= MAX_PALETTE_SIZE:
        raise ValueError(f"Palette size must be 1-{MAX_PALETTE_SIZE}, got {size}")

    last = len(targets) - 1
    if size == 1:
        indices = [last // 2]
    elif size == 2:
        indices = [0, last]
    else:
        # Round half up, so 0.5 steps land on the later target
        indices = [
            min(max(math.floor(i * last / (size - 1) + 0.5), 0), last)
            for i in range(size)
        ]
    return targets[indices]


def order_targets(
    targets: NDArray[np.float64],
    mode: Union[HarmonyMode, str],
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """
    Slot order for the remapped targets.

    Designer keeps its light→dark sequence; every other mode is shuffled
    uniformly so palettes do not always read as a ramp.
    """
    if HarmonyMode(mode) is HarmonyMode.DESIGNER or len(targets) < 2:
        return targets
    return targets[rng.permutation(len(targets))]
