# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Curated "color story" palettes.

A color story is a role-tagged palette written by a designer (main wall,
accent, trim, ...). Converting it to swatches lets a story seed a roll:
its colors become the locked anchors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from swatchroll.color.colorspace import normalize_hex
from swatchroll.schema import ColorEntity

# Slot priority when a story is laid out as a palette
ROLE_ORDER = ("main", "accent", "trim", "ceiling", "door", "cabinet")

MAX_STORY_PALETTE_SIZE = 5


@dataclass(frozen=True, slots=True)
class StoryColor:
    """
    One entry of a color story.

    Attributes:
        role: Where the color goes (e.g. "main", "trim")
        hex: Color as hex
        paint_id: Catalog id, if the story references a real paint
        brand_name, name, code: Optional paint details
        psychology, usage_tips: Designer notes carried into metadata
    """
    role: str
    hex: str
    paint_id: Optional[str] = None
    brand_name: Optional[str] = None
    name: Optional[str] = None
    code: Optional[str] = None
    psychology: Optional[str] = None
    usage_tips: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.role:
            raise ValueError("role cannot be empty")

    @classmethod
    def from_dict(cls, data: dict) -> StoryColor:
        """Deserialize from dictionary (camelCase keys accepted)."""
        return cls(
            role=data.get("role", ""),
            hex=data.get("hex", ""),
            paint_id=data.get("paint_id", data.get("paintId")),
            brand_name=data.get("brand_name", data.get("brandName")),
            name=data.get("name"),
            code=data.get("code"),
            psychology=data.get("psychology"),
            usage_tips=data.get("usage_tips", data.get("usageTips")),
        )


def _role_priority(item: StoryColor) -> int:
    try:
        return ROLE_ORDER.index(item.role)
    except ValueError:
        return len(ROLE_ORDER)


def story_color_to_entity(item: StoryColor) -> ColorEntity:
    """Convert one story entry into a swatch, deriving RGB/LAB from its hex."""
    brand_id = (
        item.brand_name.lower().replace(" ", "_") if item.brand_name else "unknown"
    )
    return ColorEntity.from_hex(
        item.hex,
        id=item.paint_id or f"synthetic_{normalize_hex(item.hex)}",
        brand_id=brand_id,
        brand_name=item.brand_name or "Custom",
        display_name=item.name or f"Color {item.role}",
        code=item.code or item.hex,
        metadata={
            "role": item.role,
            "psychology": item.psychology,
            "usage_tips": item.usage_tips,
            "source": "color_story",
        },
    )


def story_to_entities(items: Sequence[StoryColor]) -> list[ColorEntity]:
    """
    Lay a color story out as swatches.

    Entries are ordered by role priority (unknown roles last, input
    order kept within a role) and de-duplicated by paint id, or by hex
    when there is no id.
    """
    entities: list[ColorEntity] = []
    seen: set[str] = set()

    for item in sorted(items, key=_role_priority):
        identifier = item.paint_id or item.hex
        if identifier in seen:
            continue
        seen.add(identifier)
        entities.append(story_color_to_entity(item))

    return entities


def optimal_size_for_story(items: Sequence[StoryColor]) -> int:
    """Palette size for a story: its length clamped to 1-5."""
    return max(1, min(MAX_STORY_PALETTE_SIZE, len(items)))
