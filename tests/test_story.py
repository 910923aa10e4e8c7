# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""Tests for color story conversion."""

import pytest

from swatchroll.palette.story import (
    StoryColor,
    optimal_size_for_story,
    story_color_to_entity,
    story_to_entities,
)


class TestStoryColor:

    def test_requires_role(self):
        with pytest.raises(ValueError, match="role"):
            StoryColor(role="", hex="#FFFFFF")

    def test_from_dict_camel_case(self):
        item = StoryColor.from_dict({
            "role": "accent",
            "hex": "#A3B18A",
            "paintId": "sw-6204",
            "brandName": "Sherwin Williams",
            "usageTips": "Use on one wall",
        })
        assert item.paint_id == "sw-6204"
        assert item.brand_name == "Sherwin Williams"
        assert item.usage_tips == "Use on one wall"


class TestStoryToEntities:

    def test_role_order(self):
        items = [
            StoryColor(role="trim", hex="#FFFFFF"),
            StoryColor(role="mystery", hex="#123456"),
            StoryColor(role="main", hex="#A3B18A"),
            StoryColor(role="accent", hex="#3A5A40"),
        ]
        roles = [e.metadata["role"] for e in story_to_entities(items)]
        assert roles == ["main", "accent", "trim", "mystery"]

    def test_stable_within_role(self):
        items = [
            StoryColor(role="accent", hex="#111111"),
            StoryColor(role="accent", hex="#222222"),
        ]
        assert [e.hex for e in story_to_entities(items)] == ["111111", "222222"]

    def test_dedupe_by_paint_id(self):
        items = [
            StoryColor(role="main", hex="#A3B18A", paint_id="p1"),
            StoryColor(role="trim", hex="#FFFFFF", paint_id="p1"),
        ]
        entities = story_to_entities(items)
        assert len(entities) == 1
        assert entities[0].id == "p1"

    def test_dedupe_by_hex(self):
        items = [
            StoryColor(role="main", hex="#A3B18A"),
            StoryColor(role="door", hex="#A3B18A"),
        ]
        assert len(story_to_entities(items)) == 1

    def test_empty(self):
        assert story_to_entities([]) == []


class TestStoryColorToEntity:

    def test_defaults(self):
        entity = story_color_to_entity(StoryColor(role="ceiling", hex="#fdf6e3"))
        assert entity.id == "synthetic_FDF6E3"
        assert entity.brand_id == "unknown"
        assert entity.brand_name == "Custom"
        assert entity.display_name == "Color ceiling"
        assert entity.code == "#fdf6e3"
        assert entity.metadata["source"] == "color_story"

    def test_brand_details(self):
        entity = story_color_to_entity(StoryColor(
            role="main",
            hex="#A3B18A",
            paint_id="sw-6204",
            brand_name="Sherwin Williams",
            name="Sea Salt",
            code="SW 6204",
            psychology="Calm",
        ))
        assert entity.id == "sw-6204"
        assert entity.brand_id == "sherwin_williams"
        assert entity.brand_name == "Sherwin Williams"
        assert entity.display_name == "Sea Salt"
        assert entity.code == "SW 6204"
        assert entity.metadata["psychology"] == "Calm"
        assert entity.rgb == (0xA3, 0xB1, 0x8A)


class TestOptimalSize:

    @pytest.mark.parametrize("count,expected", [(0, 1), (1, 1), (3, 3), (5, 5), (8, 5)])
    def test_clamped(self, count, expected):
        items = [StoryColor(role="main", hex=f"#{i:06X}") for i in range(count)]
        assert optimal_size_for_story(items) == expected
