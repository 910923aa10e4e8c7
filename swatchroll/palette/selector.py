# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Slot filling: band-constrained nearest-neighbor search.

For each unlocked slot the selector ranks the catalog by CIEDE2000 to the
slot's target, keeps candidates whose LRV falls inside the slot's band
(widened step by step when nothing fits), and picks at random among the
best few so repeated rolls vary while staying close to the target.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from swatchroll.color.colorspace import lab_to_lch
from swatchroll.color.distance import delta_e_2000_batch, hue_distance
from swatchroll.palette.catalog import CatalogIndex
from swatchroll.schema import ColorEntity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionConfig:
    """Tunables for palette rolls and single-swatch edits."""

    # LRV tolerance schedule: 1, 3, 5, 7, 9 with the defaults
    initial_tolerance: float = 1.0
    tolerance_step: float = 2.0
    max_tolerance: float = 10.0

    # Hue-windowed search: candidates within ±hue_window degrees are ranked
    # first; the window is dropped when it holds fewer than 2 * nearest_count
    nearest_count: int = 12
    hue_window: float = 90.0

    # Pick uniformly among the best top_k banded candidates (1 = always best)
    top_k: int = 5

    # Defaults for brand swap (ΔE00) and hue nudges (degrees)
    swap_threshold: float = 10.0
    nudge_window_degrees: float = 45.0

    # Per-roll random perturbation of the seed: ±degrees hue, ±L* lightness
    hue_offset_range: float = 30.0
    lightness_offset_range: float = 10.0

    def __post_init__(self) -> None:
        """Validate tunables."""
        if self.initial_tolerance < 0.0:
            raise ValueError(f"initial_tolerance must be >= 0, got {self.initial_tolerance}")
        if self.tolerance_step <= 0.0:
            raise ValueError(f"tolerance_step must be > 0, got {self.tolerance_step}")
        if self.max_tolerance < self.initial_tolerance:
            raise ValueError(
                f"max_tolerance ({self.max_tolerance}) must be >= "
                f"initial_tolerance ({self.initial_tolerance})"
            )
        if self.nearest_count < 1:
            raise ValueError(f"nearest_count must be >= 1, got {self.nearest_count}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")
        if not 0.0 < self.hue_window <= 180.0:
            raise ValueError(f"hue_window must be in (0, 180], got {self.hue_window}")
        if self.swap_threshold < 0.0:
            raise ValueError(f"swap_threshold must be >= 0, got {self.swap_threshold}")
        if not 0.0 < self.nudge_window_degrees <= 180.0:
            raise ValueError(
                f"nudge_window_degrees must be in (0, 180], got {self.nudge_window_degrees}"
            )
        if self.hue_offset_range < 0.0 or self.lightness_offset_range < 0.0:
            raise ValueError("Offset ranges must be >= 0")


@dataclass(frozen=True)
class Selection:
    """A swatch chosen for one slot."""
    entity: ColorEntity
    tolerance: float  # LRV tolerance in effect when it was found
    delta_e: float    # CIEDE2000 to the slot target


class CandidateSelector:
    """
    Fills palette slots from a catalog.

    Args:
        catalog: Indexed catalog to draw from
        rng: NumPy random Generator (``np.random.default_rng``)
        config: Search tunables (uses defaults if None)
    """

    def __init__(
        self,
        catalog: CatalogIndex,
        rng: np.random.Generator,
        config: Optional[SelectionConfig] = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng
        self.config = config or SelectionConfig()

    def candidate_pool(self, used_brands: set[str], diversify: bool) -> NDArray[np.intp]:
        """
        Catalog positions eligible for the next slot.

        With diversification on, brands already in the palette are excluded
        as long as at least one other brand remains.
        """
        if diversify and used_brands:
            unused = np.flatnonzero(self.catalog.brand_mask(used_brands))
            if len(unused):
                return unused
        return np.arange(len(self.catalog))

    def _ranked(self, target_lab: NDArray[np.float64], pool: NDArray[np.intp]):
        """Pool positions sorted by ΔE00, plus the hue-windowed nearest few."""
        cfg = self.config
        distances = delta_e_2000_batch(target_lab, self.catalog.labs[pool])
        order = np.argsort(distances, kind="stable")

        target_hue = float(lab_to_lch(target_lab)[2])
        in_window = hue_distance(self.catalog.hues[pool], target_hue) <= cfg.hue_window
        if int(in_window.sum()) >= 2 * cfg.nearest_count:
            nearest = order[in_window[order]][:cfg.nearest_count]
        else:
            logger.debug(
                "Hue window around %.1f° holds %d swatches, ranking whole pool",
                target_hue, int(in_window.sum()),
            )
            nearest = order[:cfg.nearest_count]

        return distances, order, nearest

    def select(
        self,
        target_lab: ArrayLike,
        band: tuple[float, float],
        pool: NDArray[np.intp],
    ) -> Optional[Selection]:
        """
        Choose a swatch for one slot.

        Tries the hue-windowed nearest candidates inside the LRV band, then
        the whole pool inside the band, widening the band by
        ``tolerance_step`` until ``max_tolerance`` is exceeded.

        Returns:
            The selection, or None when nothing fits at any tolerance
        """
        cfg = self.config
        if len(pool) == 0:
            return None

        target_lab = np.asarray(target_lab, dtype=np.float64)
        distances, order, nearest = self._ranked(target_lab, pool)
        lrvs = self.catalog.lrvs[pool]

        tol = cfg.initial_tolerance
        while tol <= cfg.max_tolerance:
            low, high = band[0] - tol, band[1] + tol
            in_band = (lrvs >= low) & (lrvs <= high)

            banded = nearest[in_band[nearest]]
            if len(banded) == 0:
                banded = order[in_band[order]]

            if len(banded):
                pick = min(cfg.top_k, len(banded))
                choice = int(banded[int(self.rng.integers(pick))])
                logger.debug(
                    "Picked %s at tolerance %.1f from %d banded candidates",
                    self.catalog[int(pool[choice])].id, tol, len(banded),
                )
                return Selection(
                    entity=self.catalog[int(pool[choice])],
                    tolerance=tol,
                    delta_e=float(distances[choice]),
                )

            tol += cfg.tolerance_step

        return None

    def fill(
        self,
        anchors: Sequence[Optional[ColorEntity]],
        targets: NDArray[np.float64],
        bands: Sequence[tuple[float, float]],
        diversify: bool = True,
    ) -> tuple[list[Optional[ColorEntity]], list[Optional[float]]]:
        """
        Fill every slot left to right.

        Locked slots keep their anchor; their brand counts as used from
        that position on.

        Returns:
            (slots, tolerances): chosen swatch per slot (None if unfilled)
            and the LRV tolerance each was found at (0.0 for locked slots)
        """
        size = len(anchors)
        slots: list[Optional[ColorEntity]] = [None] * size
        tolerances: list[Optional[float]] = [None] * size
        used_brands: set[str] = set()

        for i, anchor in enumerate(anchors):
            if anchor is not None:
                slots[i] = anchor
                tolerances[i] = 0.0
                used_brands.add(anchor.brand_name)
                continue

            pool = self.candidate_pool(used_brands, diversify)
            selection = self.select(targets[i], bands[i], pool)
            if selection is None:
                logger.debug(
                    "Slot %d: no candidate within LRV band %.1f-%.1f (±%.1f)",
                    i, bands[i][0], bands[i][1], self.config.max_tolerance,
                )
                continue

            slots[i] = selection.entity
            tolerances[i] = selection.tolerance
            used_brands.add(selection.entity.brand_name)

        return slots, tolerances
