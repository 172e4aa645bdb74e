from __future__ import annotations

"""
Render dispatcher: tabulated grid -> renderer -> formatted output.

Dispatch contract
-----------------
1. Without fresh `data`, a non-empty cached grid on the tabulator is required
   (`MissingDataError`).
2. A renderer identifier is required (`MissingRendererError`).
3. The identifier is resolved through the renderer registry (`RendererLoadError`).
4. Fresh `data` is tabulated (overwriting the cache); otherwise the cache is reused.
   A renderer that cannot be loaded leaves the cache untouched.
5. Method calls are applied in order (`UnsupportedOperationError`).
6. `renderer.output(grid)` is returned verbatim (`RendererContractError` if missing).

Method calls are an explicit argument of each dispatch. The tabulator keeps
per-instance registrations only as a convenience (`Tabulator.render`).
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Sequence, Tuple

from .errors import (
    MissingDataError,
    MissingRendererError,
    RendererContractError,
    UnsupportedOperationError,
)
from .renderers import get_renderer
from .utils import log_stage

if TYPE_CHECKING:  # pragma: no cover
    from .tabulator import Tabulator

logger = logging.getLogger(__name__)

__all__ = ["MethodCall", "render"]


@dataclass(frozen=True)
class MethodCall:
    """A configuration call applied to a renderer instance before output."""

    name: str
    args: Tuple[Any, ...] = ()


def _as_method_calls(calls: Optional[Sequence[Any]]) -> List[MethodCall]:
    """Normalize `MethodCall` objects, `(name, args)` pairs and bare names."""
    out: List[MethodCall] = []
    for c in calls or ():
        if isinstance(c, MethodCall):
            out.append(c)
        elif isinstance(c, str):
            out.append(MethodCall(c))
        elif isinstance(c, (list, tuple)) and len(c) == 2:
            name, args = c
            if not isinstance(args, (list, tuple)):
                raise TypeError(
                    f"Method call arguments must be a sequence; got {type(args)} for {name!r}"
                )
            out.append(MethodCall(str(name), tuple(args)))
        else:
            raise TypeError(
                f"Method call must be a MethodCall or a (name, args) pair; got {c!r}"
            )
    return out


def _apply_method_calls(
    renderer: Any, calls: Sequence[MethodCall], *, renderer_id: str
) -> None:
    for call in calls:
        name = str(call.name)
        method = None if name.startswith("_") else getattr(renderer, name, None)
        if not callable(method):
            raise UnsupportedOperationError(
                f"Renderer {renderer_id!r} does not support {name!r}"
            )
        logger.debug("Renderer %s: %s%r", renderer_id, name, tuple(call.args))
        method(*call.args)


def render(
    tabulator: "Tabulator",
    renderer_id: str,
    *,
    data: Optional[Iterable[Any]] = None,
    calls: Optional[Sequence[Any]] = None,
) -> Any:
    """
    Render `data` (or the tabulator's cached grid) with the renderer `renderer_id`.

    Parameters
    ----------
    tabulator:
        Tabulator providing column bounds, fill value and the cached grid.
    renderer_id:
        Registry identifier, e.g. "HTMLTable" or "ASCIITable".
    data:
        Optional flat sequence. When given, it is tabulated fresh.
    calls:
        Ordered method calls (`MethodCall` or `(name, args)` pairs) applied to the
        renderer before its output is produced.

    Returns
    -------
    Any
        Whatever `renderer.output(grid)` returns.
    """
    grid = None
    if data is None:
        grid = tabulator.grid
        if not grid:
            raise MissingDataError("No data given and no tabulated data available.")

    if not renderer_id:
        raise MissingRendererError("No renderer given.")

    method_calls = _as_method_calls(calls)

    with log_stage(logger, f"render {renderer_id}", level=logging.DEBUG):
        renderer = get_renderer(str(renderer_id))
        if grid is None:
            grid = tabulator.tabulate(data)

        _apply_method_calls(renderer, method_calls, renderer_id=str(renderer_id))

        output = getattr(renderer, "output", None)
        if not callable(output):
            raise RendererContractError(
                f"Renderer {renderer_id!r} does not have an output method"
            )
        return output(grid)
