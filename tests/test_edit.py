# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""Tests for hue nudges and brand swaps."""

import math

from swatchroll.palette.edit import nudge_darker, nudge_lighter, swap_brand
from swatchroll.schema import ColorEntity


def _swatch(swatch_id, L, C, H, brand="Acme"):
    """Swatch with an exact LCH position (hex/rgb are placeholders)."""
    return ColorEntity(
        id=swatch_id,
        brand_id=brand.lower(),
        brand_name=brand,
        display_name=swatch_id,
        code=swatch_id,
        hex="808080",
        rgb=(128, 128, 128),
        lab=(L, C * math.cos(math.radians(H)), C * math.sin(math.radians(H))),
    )


class TestNudge:

    def setup_method(self):
        self.ref = _swatch("ref", 50.0, 30.0, 100.0)
        self.catalog = [
            self.ref,
            _swatch("up10", 50.0, 30.0, 110.0),
            _swatch("up20", 50.0, 30.0, 120.0),
            _swatch("down10", 50.0, 30.0, 90.0),
            _swatch("down30", 50.0, 30.0, 70.0),
            _swatch("far", 50.0, 30.0, 200.0),
        ]

    def test_lighter_is_next_hue_up(self):
        assert nudge_lighter(self.ref, self.catalog).id == "up10"

    def test_darker_is_next_hue_down(self):
        assert nudge_darker(self.ref, self.catalog).id == "down10"

    def test_reference_excluded(self):
        assert nudge_lighter(self.ref, [self.ref]) is None

    def test_window_respected(self):
        catalog = [self.ref, _swatch("far", 50.0, 30.0, 200.0)]
        assert nudge_lighter(self.ref, catalog) is None
        assert nudge_darker(self.ref, catalog) is None

    def test_custom_window(self):
        catalog = [self.ref, _swatch("wide", 50.0, 30.0, 160.0)]
        assert nudge_lighter(self.ref, catalog) is None
        assert nudge_lighter(self.ref, catalog, window=90.0).id == "wide"

    def test_tie_broken_by_lightness(self):
        catalog = [
            self.ref,
            _swatch("bright", 80.0, 30.0, 110.0),
            _swatch("close", 55.0, 30.0, 110.0),
        ]
        assert nudge_lighter(self.ref, catalog).id == "close"

    def test_same_hue_not_a_nudge(self):
        catalog = [self.ref, _swatch("twin", 70.0, 30.0, 100.0)]
        assert nudge_lighter(self.ref, catalog) is None
        assert nudge_darker(self.ref, catalog) is None

    def test_lighter_wraps_past_360(self):
        ref = _swatch("ref", 50.0, 30.0, 350.0)
        catalog = [ref, _swatch("wrap", 50.0, 30.0, 10.0), _swatch("back", 50.0, 30.0, 330.0)]
        assert nudge_lighter(ref, catalog).id == "wrap"
        assert nudge_darker(ref, catalog).id == "back"

    def test_darker_wraps_below_0(self):
        ref = _swatch("ref", 50.0, 30.0, 5.0)
        catalog = [ref, _swatch("wrap", 50.0, 30.0, 340.0)]
        assert nudge_darker(ref, catalog).id == "wrap"
        assert nudge_lighter(ref, catalog) is None


class TestSwapBrand:

    def test_closest_other_brand(self):
        ref = _swatch("ref", 50.0, 30.0, 100.0, brand="A")
        catalog = [
            ref,
            _swatch("a-twin", 50.0, 30.0, 101.0, brand="A"),
            _swatch("b-near", 51.0, 30.0, 102.0, brand="B"),
            _swatch("c-less-near", 54.0, 30.0, 104.0, brand="C"),
        ]
        assert swap_brand(ref, catalog).id == "b-near"

    def test_falls_back_to_closest_beyond_threshold(self):
        ref = _swatch("ref", 50.0, 30.0, 100.0, brand="A")
        catalog = [
            ref,
            _swatch("b-far", 80.0, 40.0, 300.0, brand="B"),
            _swatch("c-farther", 10.0, 60.0, 280.0, brand="C"),
        ]
        assert swap_brand(ref, catalog, threshold=1.0).id == "b-far"

    def test_no_other_brand(self):
        ref = _swatch("ref", 50.0, 30.0, 100.0, brand="A")
        catalog = [ref, _swatch("a2", 40.0, 20.0, 90.0, brand="A")]
        assert swap_brand(ref, catalog) is None

    def test_never_returns_same_brand(self):
        ref = _swatch("ref", 50.0, 30.0, 100.0, brand="A")
        catalog = [ref, _swatch("a-exact", 50.0, 30.0, 100.0, brand="A"), _swatch("b", 20.0, 5.0, 0.0, brand="B")]
        assert swap_brand(ref, catalog).brand_name == "B"
