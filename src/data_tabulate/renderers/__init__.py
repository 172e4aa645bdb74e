"""
Grid renderers.

Importing this package registers the built-in renderers:
- "HTMLTable": HTML `<table>` markup
- "ASCIITable": aligned plain-text table
- "Array": 2-D numpy array
"""

from __future__ import annotations

from .base import (
    Renderer,
    available_renderers,
    get_renderer,
    register_renderer,
    unregister_renderer,
)
from .array import ArrayRenderer
from .ascii_table import AsciiTableRenderer
from .html_table import HtmlTableRenderer

__all__ = [
    "Renderer",
    "available_renderers",
    "get_renderer",
    "register_renderer",
    "unregister_renderer",
    "ArrayRenderer",
    "AsciiTableRenderer",
    "HtmlTableRenderer",
]
