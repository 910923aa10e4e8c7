# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Swatch and palette value types.

Design principles:
- Immutable: all types are frozen dataclasses
- Derived, not duplicated: LCH and LRV are computed from LAB and hex,
  so they can never disagree with the stored color
- Explicit outcomes: a palette roll reports unfilled slots instead of
  silently returning a shorter list

CIELAB / CIELCH conventions:
- L (Lightness): 0 = black, 100 = white
- a, b: unbounded green-red and blue-yellow axes
- C (Chroma): 0 = neutral gray
- H (Hue): 0-360 degrees (≈40=red, ≈70=orange, ≈95=yellow, ≈140=green, ≈280=blue)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from swatchroll.color.colorspace import (
    GRAY_SENTINEL_HEX,
    LrvCache,
    hex_to_rgb,
    lab_to_lch,
    lrv_for_hex,
    normalize_hex,
    rgb_to_lab,
)


_HEX_RE = re.compile(r"[0-9A-F]{6}")

# Tolerance on L* bounds for float noise from the conversion chain
_L_SLACK = 1e-6


# =============================================================================
# Harmony Modes
# =============================================================================


class HarmonyMode(Enum):
    """Color-theory scheme used to derive palette targets from a seed."""
    NEUTRAL = "neutral"              # tonal ramp, desaturated
    ANALOGOUS = "analogous"          # neighbors within ±60° hue
    COMPLEMENTARY = "complementary"  # seed hue and its opposite
    TRIAD = "triad"                  # three hues 120° apart
    DESIGNER = "designer"            # fixed light→dark role bands


class RollStatus(Enum):
    """Outcome of a palette roll."""
    COMPLETE = "complete"  # every slot filled
    PARTIAL = "partial"    # at least one slot found no candidate
    EMPTY = "empty"        # nothing to choose from


# =============================================================================
# Core Swatch Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorEntity:
    """
    A single paint swatch with its measured color.

    Attributes:
        id: Unique identifier within a catalog
        brand_id: Stable brand key (e.g. "sherwin_williams")
        brand_name: Display brand name; brand diversification compares on this
        display_name: Marketing name of the color
        code: Manufacturer color code
        hex: Canonical ``RRGGBB`` (uppercase, no ``#``)
        rgb: sRGB channels, 0-255
        lab: CIELAB (L*, a*, b*)
        metadata: Optional free-form data carried for the caller;
            ignored by equality and hashing
    """
    id: str
    brand_id: str
    brand_name: str
    display_name: str
    code: str
    hex: str
    rgb: tuple[int, int, int]
    lab: tuple[float, float, float]
    metadata: Optional[dict] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate color fields."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not _HEX_RE.fullmatch(self.hex):
            raise ValueError(f"hex must be 6 uppercase hex digits, got {self.hex!r}")
        if len(self.rgb) != 3:
            raise ValueError(f"rgb must have 3 channels, got {len(self.rgb)}")
        if any(not 0 <= ch <= 255 for ch in self.rgb):
            raise ValueError(f"RGB channel must be 0-255, got {self.rgb}")
        if len(self.lab) != 3:
            raise ValueError(f"lab must have 3 components, got {len(self.lab)}")
        if not -_L_SLACK <= self.lab[0] <= 100.0 + _L_SLACK:
            raise ValueError(f"Lightness must be 0-100, got {self.lab[0]}")

    @property
    def lch(self) -> tuple[float, float, float]:
        """CIELCH polar form of ``lab`` (L, C, H with H in [0, 360))."""
        L, C, H = lab_to_lch(self.lab)
        return float(L), float(C), float(H)

    @property
    def lrv(self) -> float:
        """
        Light Reflectance Value (0-100), memoized in the process-wide cache.

        Use ``lrv_in`` to read through a cache injected into a roller.
        """
        return lrv_for_hex(self.hex)

    def lrv_in(self, cache: Optional[LrvCache]) -> float:
        """Light Reflectance Value (0-100), memoized in ``cache``."""
        return lrv_for_hex(self.hex, cache)

    @property
    def css_hex(self) -> str:
        """Hex with a leading ``#``, e.g. ``"#3941C8"``."""
        return f"#{self.hex}"

    @classmethod
    def from_hex(
        cls,
        hex_color: Optional[str],
        *,
        id: Optional[str] = None,
        brand_id: str = "unknown",
        brand_name: str = "Custom",
        display_name: str = "",
        code: str = "",
        metadata: Optional[dict] = None,
    ) -> ColorEntity:
        """
        Build a swatch from a hex string, deriving RGB and LAB.

        Unusable input falls back to a neutral gray instead of raising.
        Without an ``id``, a synthetic ``synthetic_<HEX>`` id is assigned.
        """
        norm = normalize_hex(hex_color) or GRAY_SENTINEL_HEX
        rgb = hex_to_rgb(norm)
        L, a, b = rgb_to_lab(rgb)
        return cls(
            id=id or f"synthetic_{norm}",
            brand_id=brand_id,
            brand_name=brand_name,
            display_name=display_name,
            code=code or norm,
            hex=norm,
            rgb=rgb,
            lab=(float(L), float(a), float(b)),
            metadata=metadata,
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary (includes derived ``lch`` and ``lrv``)."""
        d = {
            "id": self.id,
            "brand_id": self.brand_id,
            "brand_name": self.brand_name,
            "display_name": self.display_name,
            "code": self.code,
            "hex": self.hex,
            "rgb": list(self.rgb),
            "lab": list(self.lab),
            "lch": list(self.lch),
            "lrv": self.lrv,
        }
        if self.metadata is not None:
            d["metadata"] = self.metadata
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorEntity:
        """
        Deserialize from dictionary.

        ``rgb`` and ``lab`` are re-derived from ``hex`` when absent; a stored
        ``lch`` is ignored since it is always derived from ``lab``.
        """
        norm = normalize_hex(data.get("hex")) or GRAY_SENTINEL_HEX
        rgb = data.get("rgb") or hex_to_rgb(norm)
        lab = data.get("lab") or rgb_to_lab(rgb)
        return cls(
            id=data["id"],
            brand_id=data.get("brand_id", ""),
            brand_name=data.get("brand_name", ""),
            display_name=data.get("display_name", ""),
            code=data.get("code", ""),
            hex=norm,
            rgb=tuple(int(ch) for ch in rgb),
            lab=tuple(float(v) for v in lab),
            metadata=data.get("metadata"),
        )


# =============================================================================
# Palette Roll Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteResult:
    """
    Outcome of one palette roll.

    ``slots`` keeps one entry per requested position; a slot is None when
    no candidate satisfied its LRV band even at the widest tolerance.

    Attributes:
        slots: Chosen swatch per position (None = unfilled)
        targets: CIELAB target per position
        bands: (min, max) LRV band per position
        tolerances: LRV tolerance at which each slot was filled
            (0.0 for locked slots, None for unfilled ones)
        seed: Swatch the harmony targets were derived from
        mode: Harmony mode used
    """
    slots: tuple[Optional[ColorEntity], ...] = ()
    targets: tuple[tuple[float, float, float], ...] = ()
    bands: tuple[tuple[float, float], ...] = ()
    tolerances: tuple[Optional[float], ...] = ()
    seed: Optional[ColorEntity] = None
    mode: Optional[HarmonyMode] = None

    def __post_init__(self) -> None:
        """Validate per-slot sequences line up."""
        n = len(self.slots)
        for name in ("targets", "bands", "tolerances"):
            length = len(getattr(self, name))
            if length != n:
                raise ValueError(f"{name} must have {n} entries, got {length}")

    @property
    def colors(self) -> list[ColorEntity]:
        """Filled slots in order (shorter than ``slots`` when partial)."""
        return [c for c in self.slots if c is not None]

    @property
    def unfilled(self) -> tuple[int, ...]:
        """Indices of slots left without a swatch."""
        return tuple(i for i, c in enumerate(self.slots) if c is None)

    @property
    def status(self) -> RollStatus:
        if not self.slots:
            return RollStatus.EMPTY
        if self.unfilled:
            return RollStatus.PARTIAL
        return RollStatus.COMPLETE

    @property
    def is_complete(self) -> bool:
        return self.status is RollStatus.COMPLETE

    @property
    def max_tolerance(self) -> float:
        """Widest LRV tolerance applied to any filled slot."""
        return max((t for t in self.tolerances if t is not None), default=0.0)

    def __len__(self) -> int:
        return len(self.slots)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "status": self.status.value,
            "mode": self.mode.value if self.mode is not None else None,
            "seed_id": self.seed.id if self.seed is not None else None,
            "colors": [c.to_dict() for c in self.colors],
            "slots": [c.id if c is not None else None for c in self.slots],
            "unfilled": list(self.unfilled),
            "bands": [list(b) for b in self.bands],
            "tolerances": list(self.tolerances),
        }
