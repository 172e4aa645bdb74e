from __future__ import annotations

"""
Tabulation core: reshape a flat sequence into a rectangular grid.

Column count heuristic
----------------------
The number of columns is `floor(sqrt(N))`, clamped into the user-defined
`[min_columns, max_columns]` range (max-clamp first, then min-clamp).

This is a deliberate heuristic, not an optimal packing: it does not look for
the closest-to-square factorization of N and does not minimize the number of
filler cells. Renderer output (and downstream consumers) depend on this exact
formula, so it must not be "optimized".

Example (default bounds)::

    >>> Tabulator().tabulate(range(1, 11))
    [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, None, None]]
"""

import logging
import math
import numbers
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_TABULATE, TabulateConfig, tabulate_config_from
from .dispatch import MethodCall, render as _render

logger = logging.getLogger(__name__)

__all__ = ["ColumnBounds", "Grid", "Tabulator"]

Grid = List[List[Any]]

_POSITIVE_INT_RE = re.compile(r"[1-9][0-9]*")


def _as_positive_int(value: Any) -> Optional[int]:
    """
    Return `value` as a positive int, or None if it is not one.

    Accepts integral numbers (bool excluded) and decimal digit strings such as "3".
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        iv = int(value)
        return iv if iv > 0 else None
    if isinstance(value, str) and _POSITIVE_INT_RE.fullmatch(value):
        return int(value)
    return None


class ColumnBounds:
    """
    Self-repairing (minimum, maximum) column count constraint.

    Invariant: `1 <= minimum <= maximum` after every mutation. Moving one bound past
    the other drags the other bound along, so the pair is never inverted.
    """

    __slots__ = ("_min", "_max")

    def __init__(
        self,
        minimum: int = DEFAULT_TABULATE.min_columns,
        maximum: int = DEFAULT_TABULATE.max_columns,
    ) -> None:
        self._min = DEFAULT_TABULATE.min_columns
        self._max = DEFAULT_TABULATE.max_columns
        self.set_max(maximum)
        self.set_min(minimum)

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    def set_max(self, value: Any) -> int:
        """
        Set the maximum; lower the minimum if it would exceed the new maximum.

        Invalid input (non-positive, non-integer) is ignored. Returns the current maximum.
        """
        iv = _as_positive_int(value)
        if iv is None:
            if value is not None:
                logger.debug("Ignoring invalid max_columns value: %r", value)
            return self._max

        self._max = iv
        if self._min > iv:
            logger.debug("min_columns lowered from %d to %d", self._min, iv)
            self._min = iv
        return self._max

    def set_min(self, value: Any) -> int:
        """
        Set the minimum; raise the maximum if it would fall below the new minimum.

        Invalid input (non-positive, non-integer) is ignored. Returns the current minimum.
        """
        iv = _as_positive_int(value)
        if iv is None:
            if value is not None:
                logger.debug("Ignoring invalid min_columns value: %r", value)
            return self._min

        self._min = iv
        if self._max < iv:
            logger.debug("max_columns raised from %d to %d", self._max, iv)
            self._max = iv
        return self._min

    def clamp(self, cols: int) -> int:
        """Clamp `cols` into the bounds (max-clamp first, then min-clamp)."""
        cols = min(int(cols), self._max)
        return max(cols, self._min)

    def __repr__(self) -> str:
        return f"ColumnBounds(minimum={self._min}, maximum={self._max})"


class Tabulator:
    """
    Reshape flat sequences into grids and hand them to renderers.

    Each instance owns its column bounds, fill value, last computed grid and the
    method calls registered for renderers. Instances are not thread-safe; use one
    instance per concurrent caller.
    """

    def __init__(
        self,
        *,
        min_columns: int = DEFAULT_TABULATE.min_columns,
        max_columns: int = DEFAULT_TABULATE.max_columns,
        fill_value: Any = DEFAULT_TABULATE.fill_value,
    ) -> None:
        self._bounds = ColumnBounds(minimum=min_columns, maximum=max_columns)
        self._fill_value = fill_value

        self._grid: Optional[Grid] = None
        self._cols: Optional[int] = None
        self._rows: Optional[int] = None
        self._rest: Optional[int] = None

        self._method_calls: Dict[str, List[MethodCall]] = {}

    @classmethod
    def from_config(cls, cfg: Any) -> "Tabulator":
        """
        Build a tabulator from a `TabulateConfig` or a loaded OmegaConf project config.

        For project configs, values are read from the `tabulate:` section.
        """
        tcfg = cfg if isinstance(cfg, TabulateConfig) else tabulate_config_from(cfg)
        return cls(
            min_columns=tcfg.min_columns,
            max_columns=tcfg.max_columns,
            fill_value=tcfg.fill_value,
        )

    # ---------- column bounds ----------

    @property
    def min_columns(self) -> int:
        return self._bounds.minimum

    @property
    def max_columns(self) -> int:
        return self._bounds.maximum

    def set_max_columns(self, value: Any) -> int:
        """Set how many columns the table can have (at most). Returns the current maximum."""
        return self._bounds.set_max(value)

    def set_min_columns(self, value: Any) -> int:
        """Set how many columns the table can have (at least). Returns the current minimum."""
        return self._bounds.set_min(value)

    # ---------- fill value ----------

    @property
    def fill_value(self) -> Any:
        return self._fill_value

    def set_fill_value(self, value: Any) -> None:
        """Set the value used to pad the last row (default: None)."""
        self._fill_value = value

    fill_with = set_fill_value

    # ---------- tabulation ----------

    def tabulate(self, sequence: Iterable[Any]) -> Grid:
        """
        Split `sequence` into rows of equal length.

        Parameters
        ----------
        sequence:
            Any finite iterable; it is materialized before tabulation.

        Returns
        -------
        Grid
            A new list of rows. Every row has `column_count` cells; the trailing
            slots of the last row hold the fill value. Empty input gives `[]`.
        """
        data = list(sequence)
        n = len(data)

        if n == 0:
            self._grid = []
            self._cols = 0
            self._rows = 0
            self._rest = 0
            logger.debug("Empty input; cached grid cleared.")
            return []

        cols = self._bounds.clamp(math.isqrt(n))

        n_full = n // cols
        grid: Grid = [data[i * cols : (i + 1) * cols] for i in range(n_full)]

        rest = (cols - (n % cols)) % cols
        if rest > 0:
            start = n - (cols - rest)
            grid.append(data[start:] + [self._fill_value] * rest)

        self._grid = grid
        self._cols = cols
        self._rows = len(grid)
        self._rest = rest

        logger.debug(
            "Tabulated %d elements into %d rows x %d cols (%d filler cells)",
            n,
            self._rows,
            cols,
            rest,
        )
        return [list(row) for row in grid]

    @property
    def grid(self) -> Optional[Grid]:
        """Copy of the last computed grid, or None if nothing was tabulated yet."""
        if self._grid is None:
            return None
        return [list(row) for row in self._grid]

    @property
    def column_count(self) -> Optional[int]:
        return self._cols

    @property
    def row_count(self) -> Optional[int]:
        return self._rows

    @property
    def fill_count(self) -> Optional[int]:
        """Number of filler cells in the last grid."""
        return self._rest

    def get_column_count(self) -> Optional[int]:
        """Return the number of columns of the last grid (None before the first call)."""
        return self._cols

    def get_row_count(self) -> Optional[int]:
        """Return the number of rows of the last grid (None before the first call)."""
        return self._rows

    # ---------- renderer method calls ----------

    def register_method_call(self, renderer_id: str, method: str, *args: Any) -> None:
        """
        Queue a configuration call applied to `renderer_id` before its output is produced.

            tabulator.register_method_call("ASCIITable", "headings", "a", "b", "c")
        """
        self._method_calls.setdefault(str(renderer_id), []).append(
            MethodCall(str(method), tuple(args))
        )

    def clear_method_calls(self, renderer_id: str) -> None:
        """Drop all queued method calls for `renderer_id`."""
        self._method_calls.pop(str(renderer_id), None)

    def method_calls(self, renderer_id: str) -> List[MethodCall]:
        """Return the queued method calls for `renderer_id` (in registration order)."""
        return list(self._method_calls.get(str(renderer_id), []))

    def render(
        self,
        renderer_id: str,
        *,
        data: Optional[Iterable[Any]] = None,
        calls: Optional[Sequence[Any]] = None,
    ) -> Any:
        """
        Render `data` (or the last computed grid) with the renderer `renderer_id`.

        When `calls` is None, the method calls registered for `renderer_id` are used.
        See `data_tabulate.dispatch.render` for the error contract.
        """
        if calls is None and renderer_id:
            calls = self.method_calls(renderer_id)
        return _render(self, renderer_id, data=data, calls=calls)

    def __repr__(self) -> str:
        return (
            f"Tabulator(min_columns={self.min_columns}, max_columns={self.max_columns}, "
            f"fill_value={self._fill_value!r})"
        )
