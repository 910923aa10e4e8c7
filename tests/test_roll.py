# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""End-to-end tests for palette rolls."""

import logging

import numpy as np
import pytest

from swatchroll import (
    CatalogIndex,
    ColorEntity,
    HarmonyMode,
    LrvCache,
    PaletteRoller,
    RollStatus,
    SelectionConfig,
    roll_palette,
)
from swatchroll.color.colorspace import lab_to_lch


def _catalog(count=20, distinct_brands=True):
    """Warm-tinted swatches spanning LRV ≈ 5 to ≈ 95."""
    swatches = []
    for i, level in enumerate(int(v) for v in np.linspace(0x40, 0xF8, count)):
        r, g, b = min(level + 6, 255), level, max(level - 6, 0)
        brand = f"Brand {i}" if distinct_brands else "Acme"
        swatches.append(ColorEntity.from_hex(
            f"{r:02X}{g:02X}{b:02X}",
            id=f"sw-{i:02d}",
            brand_id=brand.lower().replace(" ", "_"),
            brand_name=brand,
        ))
    return swatches


def _roller(seed=42, **config):
    return PaletteRoller(rng=np.random.default_rng(seed), lrv_cache=LrvCache(), config=SelectionConfig(**config))


class TestRoll:

    def test_scenario_neutral_five(self):
        result = _roller().roll(_catalog(), [None] * 5, HarmonyMode.NEUTRAL)
        assert result.status is RollStatus.COMPLETE
        assert len(result.colors) == 5
        assert len({c.brand_name for c in result.colors}) == 5
        assert result.tolerances == (1.0,) * 5
        for swatch, (low, high), tol in zip(result.slots, result.bands, result.tolerances):
            assert low - tol <= swatch.lrv <= high + tol

    @pytest.mark.parametrize("mode", list(HarmonyMode))
    @pytest.mark.parametrize("size", [1, 2, 3, 5, 9])
    def test_every_mode_and_size(self, mode, size):
        result = _roller().roll(_catalog(), [None] * size, mode)
        assert len(result.slots) == size
        assert len(result.targets) == size
        assert result.is_complete

    @pytest.mark.parametrize("mode", list(HarmonyMode))
    def test_full_lock_invariance(self, mode):
        catalog = _catalog()
        anchors = [catalog[i] for i in (18, 14, 10, 6, 2)]
        result = _roller().roll(catalog, anchors, mode)
        assert list(result.slots) == anchors
        assert result.tolerances == (0.0,) * 5

    def test_locked_slot_kept_in_place(self):
        catalog = _catalog()
        locked = catalog[10]
        result = _roller().roll(catalog, [None, None, locked, None, None], HarmonyMode.ANALOGOUS)
        assert result.slots[2] is locked
        assert result.seed is locked
        assert result.tolerances[2] == 0.0

    def test_bands_monotone_around_lock(self):
        catalog = _catalog()
        locked = catalog[10]
        result = _roller().roll(catalog, [None, None, locked, None, None], HarmonyMode.NEUTRAL)

        bands = np.array(result.bands)
        assert np.all(np.diff(bands[:, 0]) <= 0)
        assert np.all(np.diff(bands[:, 1]) <= 0)

        for swatch, (low, high), tol in zip(result.slots, result.bands, result.tolerances):
            assert low - tol <= swatch.lrv <= high + tol
        for swatch in result.slots[:2]:
            assert swatch.lrv >= locked.lrv - 1.0
        for swatch in result.slots[3:]:
            assert swatch.lrv <= locked.lrv + 1.0

    def test_conflicting_locks_partial(self, caplog):
        catalog = _catalog() + [
            ColorEntity.from_hex("#000000", id="black", brand_name="Dark Co"),
            ColorEntity.from_hex("#FFFFFF", id="white", brand_name="Light Co"),
        ]
        black, white = catalog[-2], catalog[-1]
        with caplog.at_level(logging.WARNING, logger="swatchroll.palette.roll"):
            result = _roller().roll(catalog, [black, None, white], HarmonyMode.TRIAD)

        assert result.status is RollStatus.PARTIAL
        assert result.unfilled == (1,)
        assert result.colors == [black, white]
        assert "partially filled" in caplog.text

    def test_empty_catalog(self):
        result = _roller().roll([], [None] * 5, HarmonyMode.NEUTRAL)
        assert result.status is RollStatus.EMPTY
        assert result.colors == []

    @pytest.mark.parametrize("size", [0, 10])
    def test_size_out_of_range(self, size):
        with pytest.raises(ValueError, match="1-9"):
            _roller().roll(_catalog(), [None] * size, HarmonyMode.NEUTRAL)

    def test_reproducible_with_seeded_rng(self):
        catalog = _catalog()
        a = _roller(seed=7).roll(catalog, [None] * 5, HarmonyMode.COMPLEMENTARY)
        b = _roller(seed=7).roll(catalog, [None] * 5, HarmonyMode.COMPLEMENTARY)
        assert [c.id for c in a.colors] == [c.id for c in b.colors]
        assert a.targets == b.targets

    def test_designer_targets_lightest_first(self):
        result = _roller().roll(_catalog(), [None] * 5, HarmonyMode.DESIGNER)
        lightness = lab_to_lch(np.array(result.targets))[:, 0]
        np.testing.assert_allclose(lightness, [83.0, 65.0, 57.0, 42.0, 12.0], atol=1e-9)

    def test_string_mode(self):
        result = _roller().roll(_catalog(), [None] * 3, "analogous")
        assert result.mode is HarmonyMode.ANALOGOUS

    def test_single_brand_repeats_when_needed(self):
        result = _roller().roll(_catalog(distinct_brands=False), [None] * 3, HarmonyMode.NEUTRAL)
        assert result.is_complete
        assert {c.brand_name for c in result.colors} == {"Acme"}

    def test_accepts_catalog_index(self):
        cache = LrvCache()
        index = CatalogIndex(_catalog(), cache)
        roller = PaletteRoller(rng=np.random.default_rng(1), lrv_cache=cache)
        assert roller.roll(index, [None] * 4, HarmonyMode.TRIAD).is_complete

    def test_default_rng_is_numpy_generator(self):
        roller = PaletteRoller()
        assert isinstance(roller.rng, np.random.Generator)
        assert roller.roll(_catalog(), [None] * 3, HarmonyMode.TRIAD).is_complete

    def test_populates_injected_cache(self):
        cache = LrvCache()
        PaletteRoller(rng=np.random.default_rng(1), lrv_cache=cache).roll(
            _catalog(), [None] * 3, HarmonyMode.NEUTRAL,
        )
        assert len(cache) == 20

    def test_anchor_lrv_read_through_injected_cache(self):
        cache = LrvCache()
        anchor = ColorEntity.from_hex("#123456", id="outside", brand_name="Elsewhere")
        PaletteRoller(rng=np.random.default_rng(1), lrv_cache=cache).roll(
            _catalog(), [anchor, None, None], HarmonyMode.NEUTRAL,
        )
        assert "#123456" in cache

    def test_to_dict(self):
        d = _roller().roll(_catalog(), [None] * 3, HarmonyMode.TRIAD).to_dict()
        assert d["status"] == "complete"
        assert d["mode"] == "triad"
        assert len(d["colors"]) == 3


class TestRollPalette:

    def test_one_shot(self):
        result = roll_palette(_catalog(), [None] * 5, HarmonyMode.NEUTRAL, rng=np.random.default_rng(3))
        assert result.is_complete

    def test_diversify_off_allowed(self):
        result = roll_palette(
            _catalog(), [None] * 5, HarmonyMode.NEUTRAL,
            diversify_brands=False, rng=np.random.default_rng(3),
        )
        assert len(result.colors) == 5


class TestRollerEdits:

    def _hue_swatch(self, swatch_id, hue, brand="Acme"):
        lab = (50.0, 30.0 * np.cos(np.radians(hue)), 30.0 * np.sin(np.radians(hue)))
        return ColorEntity(
            id=swatch_id, brand_id=brand.lower(), brand_name=brand, display_name="",
            code=swatch_id, hex="808080", rgb=(128, 128, 128), lab=tuple(float(v) for v in lab),
        )

    def test_nudge_window_from_config(self):
        ref = self._hue_swatch("ref", 100.0)
        catalog = [ref, self._hue_swatch("wide", 160.0)]
        assert _roller().nudge_lighter(ref, catalog) is None
        assert _roller(nudge_window_degrees=90.0).nudge_lighter(ref, catalog).id == "wide"

    def test_nudge_darker(self):
        ref = self._hue_swatch("ref", 100.0)
        catalog = [ref, self._hue_swatch("down", 80.0)]
        assert _roller().nudge_darker(ref, catalog).id == "down"

    def test_swap_brand(self):
        ref = self._hue_swatch("ref", 100.0, brand="A")
        catalog = [ref, self._hue_swatch("b", 105.0, brand="B")]
        assert _roller().swap_brand(ref, catalog).id == "b"
