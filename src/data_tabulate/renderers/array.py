"""numpy array renderer."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .base import Renderer, register_renderer

__all__ = ["ArrayRenderer"]


@register_renderer("Array")
class ArrayRenderer(Renderer):
    """
    Return the grid as a 2-D `numpy.ndarray` of shape `(rows, cols)`.

    The default dtype is `object` so arbitrary cells (and `None` fill values) are
    kept as-is. An empty grid gives an array of shape `(0, 0)`.
    """

    def __init__(self) -> None:
        self._dtype: np.dtype = np.dtype(object)

    def dtype(self, name: Any) -> None:
        """Set the array dtype, e.g. "float64" or "int32"."""
        self._dtype = np.dtype(name)

    def output(self, grid: Sequence[Sequence[Any]]) -> np.ndarray:
        n_rows = len(grid)
        n_cols = len(grid[0]) if n_rows else 0

        out = np.empty((n_rows, n_cols), dtype=self._dtype)
        for i, row in enumerate(grid):
            if len(row) != n_cols:
                raise ValueError(
                    f"Grid is not rectangular: row {i} has {len(row)} cells, expected {n_cols}."
                )
            for j, v in enumerate(row):
                out[i, j] = v
        return out
