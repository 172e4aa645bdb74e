"""Plain-text (ASCII) table renderer."""

from __future__ import annotations

import math
import numbers
from typing import Any, List, Optional, Sequence

from .base import Renderer, register_renderer

__all__ = ["AsciiTableRenderer"]


def _is_number(x: Any) -> bool:
    return isinstance(x, numbers.Number) and not isinstance(x, bool)


@register_renderer("ASCIITable")
class AsciiTableRenderer(Renderer):
    """
    Render a grid as an aligned text table::

         1 | 2 | 3
         4 | 5 | 6
         7 | 8 | 9
        10 |   |

    Columns holding only numbers (and `None` fill cells) are right aligned, all
    other columns are left aligned. `None` renders as an empty cell.
    """

    def __init__(self) -> None:
        self._headings: Optional[List[str]] = None
        self._float_format: Optional[str] = None

    def headings(self, *names: Any) -> None:
        """Add a header row followed by a separator line."""
        self._headings = [str(n) for n in names]

    def float_format(self, spec: str) -> None:
        """Format spec applied to float cells, e.g. ".2f" (validated eagerly)."""
        format(1.0, str(spec))
        self._float_format = str(spec)

    def _format_cell(self, x: Any) -> str:
        if x is None:
            return ""
        if isinstance(x, float):
            if math.isinf(x):
                return "inf" if x > 0 else "-inf"
            if math.isnan(x):
                return "nan"
            if self._float_format is not None:
                return format(x, self._float_format)
        return str(x)

    def output(self, grid: Sequence[Sequence[Any]]) -> str:
        n_cols = max((len(r) for r in grid), default=0)
        headers = list(self._headings) if self._headings is not None else None
        if headers is not None:
            if len(headers) > n_cols and grid:
                raise ValueError(
                    f"Got {len(headers)} headings for a table with {n_cols} columns."
                )
            n_cols = max(n_cols, len(headers))
            headers += [""] * (n_cols - len(headers))

        rows: List[List[str]] = [
            [self._format_cell(v) for v in r] + [""] * (n_cols - len(r)) for r in grid
        ]

        widths = [len(h) for h in headers] if headers is not None else [0] * n_cols
        for r in rows:
            for i, cell in enumerate(r):
                widths[i] = max(widths[i], len(cell))

        align_right = [
            all(_is_number(r[i]) for r in grid if i < len(r) and r[i] is not None)
            for i in range(n_cols)
        ]

        def fmt_row(values: Sequence[str]) -> str:
            out = []
            for i, v in enumerate(values):
                if align_right[i]:
                    out.append(v.rjust(widths[i]))
                else:
                    out.append(v.ljust(widths[i]))
            return " | ".join(out)

        out_lines: List[str] = []
        if headers is not None:
            out_lines.append(fmt_row(headers))
            out_lines.append("-+-".join("-" * w for w in widths))
        out_lines.extend(fmt_row(r) for r in rows)
        return "\n".join(out_lines)
