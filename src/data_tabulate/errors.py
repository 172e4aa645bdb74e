"""
Exception taxonomy for tabulation and rendering.

All errors are usage/configuration errors raised synchronously to the caller.
Invalid column bounds are NOT errors: the setters ignore them and keep the
previous state.
"""

from __future__ import annotations

__all__ = [
    "TabulateError",
    "MissingDataError",
    "MissingRendererError",
    "RendererLoadError",
    "UnsupportedOperationError",
    "RendererContractError",
]


class TabulateError(Exception):
    """Base class for all errors raised by this package."""


class MissingDataError(TabulateError):
    """Render was called with neither fresh data nor a usable cached grid."""


class MissingRendererError(TabulateError):
    """Render was called without a renderer identifier."""


class RendererLoadError(TabulateError, LookupError):
    """A renderer identifier could not be resolved or instantiated."""


class UnsupportedOperationError(TabulateError, AttributeError):
    """A method call targets a capability the renderer does not expose."""


class RendererContractError(TabulateError, TypeError):
    """The resolved renderer has no callable `output` method."""
