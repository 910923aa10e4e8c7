# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Readability and undertone helpers for rendering swatches.

WCAG 2.x relative luminance and contrast ratio, plus coarse undertone
tags derived from CIELCH hue and chroma.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from swatchroll.color.colorspace import hex_to_rgb, lab_to_lch

BLACK_HEX = "000000"
WHITE_HEX = "FFFFFF"

# Below this chroma a swatch reads as neutral
NEUTRAL_CHROMA = 10.0

# Above this chroma a swatch carries a warm/cool temperature
TEMPERATURE_CHROMA = 15.0

# Upper hue bound (exclusive) for each family, in order; red wraps around 345
_HUE_FAMILIES = (
    (15.0, "red"),
    (45.0, "orange"),
    (75.0, "yellow"),
    (165.0, "green"),
    (255.0, "blue"),
    (285.0, "purple"),
    (315.0, "magenta"),
    (345.0, "pink"),
    (360.0, "red"),
)


def relative_luminance(hex_color: Optional[str]) -> float:
    """WCAG relative luminance (0-1) of a hex color."""
    srgb = np.asarray(hex_to_rgb(hex_color), dtype=np.float64) / 255.0
    # WCAG 2.x uses the older 0.03928 breakpoint
    linear = np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )
    return float(0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2])


def contrast_ratio(hex1: Optional[str], hex2: Optional[str]) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]."""
    l1 = relative_luminance(hex1)
    l2 = relative_luminance(hex2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def preferred_text_color(background_hex: Optional[str]) -> str:
    """
    Black or white, whichever reads better on ``background_hex``.

    Ties go to black.
    """
    if contrast_ratio(BLACK_HEX, background_hex) >= contrast_ratio(WHITE_HEX, background_hex):
        return BLACK_HEX
    return WHITE_HEX


def is_light_color(hex_color: Optional[str]) -> bool:
    """True if relative luminance is above 0.5."""
    return relative_luminance(hex_color) > 0.5


def undertone_tags(lab: ArrayLike) -> list[str]:
    """
    Coarse undertone tags for a CIELAB color.

    Low-chroma colors are tagged ``["neutral"]``. Otherwise a hue family
    (red, orange, yellow, green, blue, purple, magenta, pink) is given,
    followed by ``"warm"`` or ``"cool"`` when chroma is high enough.

    Example:
        >>> undertone_tags((50.0, 0.0, -40.0))
        ['purple', 'cool']
    """
    _, chroma, hue = (float(v) for v in lab_to_lch(lab))

    if chroma < NEUTRAL_CHROMA:
        return ["neutral"]

    tags = [next(name for bound, name in _HUE_FAMILIES if hue < bound)]

    if chroma > TEMPERATURE_CHROMA:
        if hue >= 315.0 or hue < 135.0:
            tags.append("warm")
        else:
            tags.append("cool")

    return tags
