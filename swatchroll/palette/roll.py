# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Palette roll API.

This is the primary entry point: given a catalog, per-slot anchors and a
harmony mode, synthesize an ordered palette.

Pipeline:
1. Seed: first locked anchor, else a random catalog swatch
2. Five harmony targets from the seed, perturbed by random hue/lightness
3. Remap to the palette size, then shuffle (all modes except designer)
4. LRV bands from the locked anchors
5. Fill unlocked slots by banded nearest-neighbor search
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from swatchroll.color.colorspace import DEFAULT_LRV_CACHE, LrvCache
from swatchroll.palette.bands import solve_lrv_bands
from swatchroll.palette.catalog import CatalogIndex
from swatchroll.palette.edit import nudge_darker, nudge_lighter, swap_brand
from swatchroll.palette.harmony import (
    MAX_PALETTE_SIZE,
    generate_harmony_targets,
    order_targets,
    remap_targets,
)
from swatchroll.palette.selector import CandidateSelector, SelectionConfig
from swatchroll.schema import ColorEntity, HarmonyMode, PaletteResult

logger = logging.getLogger(__name__)

Catalog = Union[CatalogIndex, Iterable[ColorEntity]]


class PaletteRoller:
    """
    Palette synthesis engine with explicit dependencies.

    Args:
        rng: NumPy random Generator. Pass ``np.random.default_rng(seed)``
            for reproducible rolls. Defaults to a fresh unseeded Generator.
        lrv_cache: LRV memo shared across rolls (default: process-wide)
        config: Search and perturbation tunables

    Example:
        >>> roller = PaletteRoller(rng=np.random.default_rng(7))
        >>> result = roller.roll(catalog, [None] * 5, HarmonyMode.ANALOGOUS)
        >>> result.status
        <RollStatus.COMPLETE: 'complete'>
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        lrv_cache: Optional[LrvCache] = None,
        config: Optional[SelectionConfig] = None,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.lrv_cache = lrv_cache if lrv_cache is not None else DEFAULT_LRV_CACHE
        self.config = config or SelectionConfig()

    def _index(self, catalog: Catalog) -> CatalogIndex:
        if isinstance(catalog, CatalogIndex):
            return catalog
        return CatalogIndex(catalog, self.lrv_cache)

    def roll(
        self,
        catalog: Catalog,
        anchors: Sequence[Optional[ColorEntity]],
        mode: Union[HarmonyMode, str],
        diversify_brands: bool = True,
    ) -> PaletteResult:
        """
        Synthesize a palette.

        Args:
            catalog: Swatches to choose from (or a prebuilt CatalogIndex)
            anchors: One entry per slot: a locked swatch, or None to fill.
                The length is the palette size (1-9).
            mode: Harmony mode
            diversify_brands: Avoid repeating a brand while others remain

        Returns:
            PaletteResult. Locked slots are returned unchanged in place;
            ``status`` is PARTIAL if any slot could not be filled and
            EMPTY if the catalog is empty.

        Raises:
            ValueError: If the palette size is outside 1-9
        """
        index = self._index(catalog)
        if not len(index):
            return PaletteResult()

        anchors = tuple(anchors)
        size = len(anchors)
        if not 1 <= size <= MAX_PALETTE_SIZE:
            raise ValueError(f"Palette size must be 1-{MAX_PALETTE_SIZE}, got {size}")
        mode = HarmonyMode(mode)
        cfg = self.config

        seed = next((a for a in anchors if a is not None), None)
        if seed is None:
            seed = index[int(self.rng.integers(len(index)))]

        hue_offset = float(self.rng.uniform(-cfg.hue_offset_range, cfg.hue_offset_range))
        lightness_offset = float(
            self.rng.uniform(-cfg.lightness_offset_range, cfg.lightness_offset_range)
        )

        base = generate_harmony_targets(seed.lab, mode, hue_offset, lightness_offset)
        targets = order_targets(remap_targets(base, size), mode, self.rng)

        locked_lrvs = [
            a.lrv_in(self.lrv_cache) if a is not None else None for a in anchors
        ]
        bands = solve_lrv_bands(locked_lrvs, index.lrv_range)

        logger.debug(
            "Rolling %d slots, mode=%s, seed=%s, hue %+.1f°, lightness %+.1f",
            size, mode.value, seed.id, hue_offset, lightness_offset,
        )

        selector = CandidateSelector(index, self.rng, cfg)
        slots, tolerances = selector.fill(anchors, targets, bands, diversify_brands)

        result = PaletteResult(
            slots=tuple(slots),
            targets=tuple(tuple(float(v) for v in t) for t in targets),
            bands=tuple(bands),
            tolerances=tuple(tolerances),
            seed=seed,
            mode=mode,
        )
        if result.unfilled:
            logger.warning(
                "Palette partially filled: slots %s found no swatch within LRV tolerance %.1f",
                list(result.unfilled), cfg.max_tolerance,
            )
        return result

    def nudge_lighter(
        self,
        reference: ColorEntity,
        catalog: Catalog,
        window: Optional[float] = None,
    ) -> Optional[ColorEntity]:
        """Next swatch up the hue wheel (see ``edit.nudge_lighter``)."""
        window = self.config.nudge_window_degrees if window is None else window
        return nudge_lighter(reference, tuple(catalog), window)

    def nudge_darker(
        self,
        reference: ColorEntity,
        catalog: Catalog,
        window: Optional[float] = None,
    ) -> Optional[ColorEntity]:
        """Next swatch down the hue wheel (see ``edit.nudge_darker``)."""
        window = self.config.nudge_window_degrees if window is None else window
        return nudge_darker(reference, tuple(catalog), window)

    def swap_brand(
        self,
        reference: ColorEntity,
        catalog: Catalog,
        threshold: Optional[float] = None,
    ) -> Optional[ColorEntity]:
        """Closest other-brand swatch (see ``edit.swap_brand``)."""
        threshold = self.config.swap_threshold if threshold is None else threshold
        return swap_brand(reference, tuple(catalog), threshold)


def roll_palette(
    catalog: Catalog,
    anchors: Sequence[Optional[ColorEntity]],
    mode: Union[HarmonyMode, str],
    *,
    diversify_brands: bool = True,
    rng: Optional[np.random.Generator] = None,
    lrv_cache: Optional[LrvCache] = None,
    config: Optional[SelectionConfig] = None,
) -> PaletteResult:
    """
    One-shot palette roll.

    Convenience wrapper around ``PaletteRoller(...).roll(...)``.

    Example:
        >>> from swatchroll import roll_palette, HarmonyMode
        >>> result = roll_palette(catalog, [None, locked, None], HarmonyMode.TRIAD)
        >>> [c.hex for c in result.colors]
        ['F2E6D0', 'A3B18A', '3A5A40']
    """
    roller = PaletteRoller(rng=rng, lrv_cache=lrv_cache, config=config)
    return roller.roll(catalog, anchors, mode, diversify_brands=diversify_brands)
