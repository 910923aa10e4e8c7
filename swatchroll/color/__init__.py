# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Color math for Swatchroll.

Device-independent conversions (hex, sRGB, XYZ, CIELAB, CIELCH), Light
Reflectance Value, and the CIEDE2000 perceptual distance.
"""

from swatchroll.color.colorspace import (
    DEFAULT_LRV_CACHE,
    GRAY_SENTINEL_HEX,
    LrvCache,
    hex_to_lab,
    hex_to_rgb,
    lab_to_lch,
    lch_to_lab,
    lrv_for_hex,
    lrv_for_swatch,
    normalize_hex,
    process_color,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
)
from swatchroll.color.contrast import (
    contrast_ratio,
    is_light_color,
    preferred_text_color,
    relative_luminance,
    undertone_tags,
)
from swatchroll.color.distance import (
    delta_e_2000,
    delta_e_2000_batch,
    nearest_by_delta_e,
    nearest_by_delta_e_hue_window,
    nearest_by_delta_e_multiple,
)

__all__ = [
    # Hex parsing
    "normalize_hex",
    "hex_to_rgb",
    "GRAY_SENTINEL_HEX",
    # Conversions
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    "hex_to_lab",
    "lab_to_lch",
    "lch_to_lab",
    "process_color",
    # LRV
    "LrvCache",
    "DEFAULT_LRV_CACHE",
    "lrv_for_hex",
    "lrv_for_swatch",
    # Distance
    "delta_e_2000",
    "delta_e_2000_batch",
    "nearest_by_delta_e",
    "nearest_by_delta_e_multiple",
    "nearest_by_delta_e_hue_window",
    # Contrast and undertone
    "relative_luminance",
    "contrast_ratio",
    "preferred_text_color",
    "is_light_color",
    "undertone_tags",
]
