# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Single-swatch edits: hue nudges and brand swaps.

These back the per-slot controls of a palette editor: step a swatch to
its nearest neighbor up or down the hue wheel, or find the closest match
from a different manufacturer.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from swatchroll.color.colorspace import lab_to_lch
from swatchroll.color.distance import delta_e_2000_batch
from swatchroll.schema import ColorEntity

logger = logging.getLogger(__name__)

DEFAULT_NUDGE_WINDOW = 45.0
DEFAULT_SWAP_THRESHOLD = 10.0


def _nudge(
    reference: ColorEntity,
    catalog: Sequence[ColorEntity],
    window: float,
    upward: bool,
) -> Optional[ColorEntity]:
    candidates = [e for e in catalog if e.id != reference.id]
    if not candidates:
        return None

    ref_L, _, ref_H = reference.lch
    lch = lab_to_lch(np.array([e.lab for e in candidates], dtype=np.float64))

    # Signed hue difference in (-180, 180]
    diff = (lch[:, 2] - ref_H) % 360.0
    diff = np.where(diff > 180.0, diff - 360.0, diff)

    if upward:
        mask = (diff > 0.0) & (diff <= window)
    else:
        mask = (diff < 0.0) & (diff >= -window)

    eligible = np.flatnonzero(mask)
    if len(eligible) == 0:
        return None

    # Closest hue first, then closest lightness
    rank = np.lexsort((
        np.abs(lch[eligible, 0] - ref_L),
        np.abs(diff[eligible]),
    ))
    return candidates[int(eligible[rank[0]])]


def nudge_lighter(
    reference: ColorEntity,
    catalog: Sequence[ColorEntity],
    window: float = DEFAULT_NUDGE_WINDOW,
) -> Optional[ColorEntity]:
    """
    Next swatch up the hue wheel, within ``window`` degrees.

    Ties on hue distance go to the swatch closest in lightness.
    Returns None when no other swatch lies in (0, +window].
    """
    return _nudge(reference, catalog, window, upward=True)


def nudge_darker(
    reference: ColorEntity,
    catalog: Sequence[ColorEntity],
    window: float = DEFAULT_NUDGE_WINDOW,
) -> Optional[ColorEntity]:
    """
    Next swatch down the hue wheel, within ``window`` degrees.

    Ties on hue distance go to the swatch closest in lightness.
    Returns None when no other swatch lies in [-window, 0).
    """
    return _nudge(reference, catalog, window, upward=False)


def swap_brand(
    reference: ColorEntity,
    catalog: Sequence[ColorEntity],
    threshold: float = DEFAULT_SWAP_THRESHOLD,
) -> Optional[ColorEntity]:
    """
    Closest swatch from a different brand.

    Prefers matches within ``threshold`` ΔE00; if none qualifies, the
    closest other-brand swatch is returned anyway. Returns None only when
    the catalog has no other brand.
    """
    others = [e for e in catalog if e.brand_name != reference.brand_name]
    if not others:
        return None

    distances = delta_e_2000_batch(
        reference.lab, np.array([e.lab for e in others], dtype=np.float64),
    )
    within = np.flatnonzero(distances <= threshold)
    if len(within):
        return others[int(within[np.argmin(distances[within])])]

    best = int(np.argmin(distances))
    logger.debug(
        "No other-brand match within ΔE %.1f of %s; closest is %.2f",
        threshold, reference.id, float(distances[best]),
    )
    return others[best]
