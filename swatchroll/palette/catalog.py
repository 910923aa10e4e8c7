# Copyright (c) 2026 Swatchroll
# SPDX-License-Identifier: MIT

"""
Array-backed view of a swatch catalog.

Each swatch's LAB, hue and LRV are gathered once into NumPy arrays so
that per-slot searches are vectorized over the whole catalog.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from swatchroll.color.colorspace import DEFAULT_LRV_CACHE, LrvCache, lab_to_lch
from swatchroll.palette.bands import catalog_lrv_range
from swatchroll.schema import ColorEntity


class CatalogIndex:
    """
    Validated, read-only catalog of swatches.

    Attributes:
        entities: Swatches in input order
        labs: Array of shape (N, 3) with CIELAB values
        hues: Array of shape (N,) with CIELCH hue in degrees
        lrvs: Array of shape (N,) with LRV (0-100)
        brands: Array of shape (N,) with brand names
    """

    def __init__(
        self,
        entities: Iterable[ColorEntity],
        lrv_cache: Optional[LrvCache] = None,
    ) -> None:
        self.entities: tuple[ColorEntity, ...] = tuple(entities)

        duplicates = [
            swatch_id
            for swatch_id, count in Counter(e.id for e in self.entities).items()
            if count > 1
        ]
        if duplicates:
            raise ValueError(f"Catalog ids must be unique, duplicated: {sorted(duplicates)}")

        cache = lrv_cache if lrv_cache is not None else DEFAULT_LRV_CACHE
        self.labs: NDArray[np.float64] = np.array(
            [e.lab for e in self.entities], dtype=np.float64
        ).reshape(-1, 3)
        self.hues: NDArray[np.float64] = lab_to_lch(self.labs)[:, 2]
        self.lrvs: NDArray[np.float64] = np.array(
            [cache.get(e.hex) for e in self.entities], dtype=np.float64
        )
        self.brands: NDArray[np.object_] = np.array(
            [e.brand_name for e in self.entities], dtype=object
        )

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[ColorEntity]:
        return iter(self.entities)

    def __getitem__(self, index: int) -> ColorEntity:
        return self.entities[index]

    @property
    def lrv_range(self) -> tuple[float, float]:
        """Observed (min, max) LRV; ``(100.0, 0.0)`` for an empty catalog."""
        return catalog_lrv_range(self.lrvs)

    def brand_mask(self, exclude: set[str]) -> NDArray[np.bool_]:
        """Boolean mask of swatches whose brand is not in ``exclude``."""
        return np.fromiter(
            (brand not in exclude for brand in self.brands),
            dtype=bool,
            count=len(self),
        )
