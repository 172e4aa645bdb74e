"""
data_tabulate package.

The repository uses a `src/` layout. Library code lives under `src/data_tabulate`.

Public API
----------
- `Tabulator`: reshape a flat sequence into a grid and render it.
- `render`: dispatch a grid to a registered renderer.
- `register_renderer` / `get_renderer`: renderer registry.
"""

from __future__ import annotations

from .dispatch import MethodCall, render
from .errors import (
    MissingDataError,
    MissingRendererError,
    RendererContractError,
    RendererLoadError,
    TabulateError,
    UnsupportedOperationError,
)
from .renderers import Renderer, available_renderers, get_renderer, register_renderer
from .tabulator import ColumnBounds, Grid, Tabulator

__all__ = [
    "__version__",
    "ColumnBounds",
    "Grid",
    "MethodCall",
    "MissingDataError",
    "MissingRendererError",
    "Renderer",
    "RendererContractError",
    "RendererLoadError",
    "TabulateError",
    "Tabulator",
    "UnsupportedOperationError",
    "available_renderers",
    "get_renderer",
    "register_renderer",
    "render",
]

__version__ = "0.9.0"
