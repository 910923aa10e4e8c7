# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Swatchroll -- Perceptual palette synthesis for paint catalogs.

Rolls harmonious, brand-diverse palettes from a catalog of paint swatches,
honoring any swatches the user has locked in place.

Quick start::

    import numpy as np
    from swatchroll import ColorEntity, HarmonyMode, roll_palette

    catalog = [ColorEntity.from_hex("#A3B18A", id="sage", brand_name="Acme"), ...]
    result = roll_palette(catalog, [None] * 5, HarmonyMode.ANALOGOUS,
                          rng=np.random.default_rng(42))
    result.colors        # ordered swatches
    result.status        # COMPLETE / PARTIAL / EMPTY
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchroll.color import LrvCache, delta_e_2000, normalize_hex
from swatchroll.palette import (
    CatalogIndex,
    PaletteRoller,
    SelectionConfig,
    StoryColor,
    nudge_darker,
    nudge_lighter,
    roll_palette,
    story_to_entities,
    swap_brand,
)
from swatchroll.schema import (
    ColorEntity,
    HarmonyMode,
    PaletteResult,
    RollStatus,
)

__all__ = [
    # Core API
    "roll_palette",
    "PaletteRoller",
    "SelectionConfig",
    "PaletteResult",
    "RollStatus",
    # Types (commonly needed)
    "ColorEntity",
    "HarmonyMode",
    "CatalogIndex",
    "LrvCache",
    # Edits
    "nudge_lighter",
    "nudge_darker",
    "swap_brand",
    # Color stories
    "StoryColor",
    "story_to_entities",
    # Color math
    "normalize_hex",
    "delta_e_2000",
    # Version
    "__version__",
]
