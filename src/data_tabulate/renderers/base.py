"""Renderer interface and registry.

A renderer turns a grid (list of equally long rows) into a formatted value.
Renderers are constructed without arguments, may expose configuration methods
(called with positional arguments before output) and must provide
`output(grid)`.

Concrete renderers register themselves under an identifier::

    @register_renderer("HTMLTable")
    class HtmlTableRenderer(Renderer):
        ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..errors import RendererLoadError

logger = logging.getLogger(__name__)

__all__ = [
    "Renderer",
    "available_renderers",
    "get_renderer",
    "register_renderer",
    "unregister_renderer",
]

RendererFactory = Callable[[], Any]

_REGISTRY: Dict[str, RendererFactory] = {}


class Renderer(ABC):
    """Abstract base class for grid renderers."""

    @abstractmethod
    def output(self, grid: Sequence[Sequence[Any]]) -> Any:
        """Return the formatted representation of `grid`."""
        raise NotImplementedError


def register_renderer(name: str, factory: Optional[RendererFactory] = None) -> Any:
    """
    Register `factory` (usually a class) under `name`.

    Can be used directly or as a class decorator. Re-registering a name replaces
    the previous factory.
    """
    key = str(name).strip()
    if not key:
        raise ValueError("Renderer name must be a non-empty string.")

    def _register(f: RendererFactory) -> RendererFactory:
        if not callable(f):
            raise TypeError(f"Renderer factory for {key!r} must be callable; got {f!r}")
        if key in _REGISTRY and _REGISTRY[key] is not f:
            logger.debug("Replacing renderer %s", key)
        _REGISTRY[key] = f
        return f

    if factory is None:
        return _register
    return _register(factory)


def unregister_renderer(name: str) -> None:
    """Remove `name` from the registry (no-op if it is not registered)."""
    _REGISTRY.pop(str(name), None)


def available_renderers() -> List[str]:
    """Return registered renderer identifiers (sorted)."""
    return sorted(_REGISTRY)


def get_renderer(name: str) -> Any:
    """
    Resolve `name` and return a new renderer instance.

    Raises
    ------
    RendererLoadError
        If `name` is not registered or the factory fails.
    """
    try:
        factory = _REGISTRY[str(name)]
    except KeyError:
        raise RendererLoadError(
            f"could not load renderer {name!r} "
            f"(available: {', '.join(available_renderers()) or 'none'})"
        ) from None

    try:
        return factory()
    except Exception as e:
        raise RendererLoadError(f"could not instantiate renderer {name!r}: {e}") from e
