# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Schema definitions for swatches and palette rolls.

All types in this module are immutable (frozen dataclasses).
"""

from swatchroll.schema.swatch import (
    ColorEntity,
    HarmonyMode,
    PaletteResult,
    RollStatus,
)

__all__ = [
    # Core types
    "ColorEntity",
    "HarmonyMode",
    # Roll outcome
    "RollStatus",
    "PaletteResult",
]
