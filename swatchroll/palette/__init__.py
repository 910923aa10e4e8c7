# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Palette synthesis for Swatchroll.

Harmony targets, LRV bands and banded nearest-neighbor search over a
swatch catalog, plus single-swatch edits.
"""

from swatchroll.palette.bands import catalog_lrv_range, solve_lrv_bands
from swatchroll.palette.catalog import CatalogIndex
from swatchroll.palette.edit import nudge_darker, nudge_lighter, swap_brand
from swatchroll.palette.harmony import (
    MAX_PALETTE_SIZE,
    generate_harmony_targets,
    order_targets,
    remap_targets,
)
from swatchroll.palette.roll import PaletteRoller, roll_palette
from swatchroll.palette.selector import CandidateSelector, Selection, SelectionConfig
from swatchroll.palette.story import (
    StoryColor,
    optimal_size_for_story,
    story_to_entities,
)

__all__ = [
    # Entry points
    "roll_palette",
    "PaletteRoller",
    # Pipeline stages
    "CatalogIndex",
    "generate_harmony_targets",
    "remap_targets",
    "order_targets",
    "catalog_lrv_range",
    "solve_lrv_bands",
    "CandidateSelector",
    "Selection",
    "SelectionConfig",
    "MAX_PALETTE_SIZE",
    # Single-swatch edits
    "nudge_lighter",
    "nudge_darker",
    "swap_brand",
    # Color stories
    "StoryColor",
    "story_to_entities",
    "optimal_size_for_story",
]
