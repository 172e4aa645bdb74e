"""HTML table renderer."""

from __future__ import annotations

import html
from typing import Any, Dict, Mapping, Sequence

from .base import Renderer, register_renderer

__all__ = ["HtmlTableRenderer"]


@register_renderer("HTMLTable")
class HtmlTableRenderer(Renderer):
    """
    Render a grid as an HTML `<table>`, one tag per line::

        <table>
        <tr><td>1</td><td>2</td><td>3</td></tr>
        <tr><td>4</td><td>&nbsp;</td><td>&nbsp;</td></tr>
        </table>

    Cell values are escaped. `None` cells (the default fill value) are rendered as
    the placeholder, which is inserted verbatim.
    """

    def __init__(self) -> None:
        self._attributes: Dict[str, str] = {}
        self._placeholder = "&nbsp;"

    def attributes(self, attrs: Mapping[str, Any]) -> None:
        """Set attributes of the `<table>` tag, e.g. `{"border": 1}`."""
        if not isinstance(attrs, Mapping):
            raise TypeError(f"attributes must be a mapping; got {type(attrs)}")
        self._attributes.update({str(k): str(v) for k, v in attrs.items()})

    def placeholder(self, text: str) -> None:
        """Set the raw HTML used for `None` cells."""
        self._placeholder = str(text)

    def _cell(self, value: Any) -> str:
        if value is None:
            return self._placeholder
        return html.escape(str(value))

    def _open_tag(self) -> str:
        attrs = "".join(
            f' {html.escape(k)}="{html.escape(v, quote=True)}"'
            for k, v in sorted(self._attributes.items())
        )
        return f"<table{attrs}>"

    def output(self, grid: Sequence[Sequence[Any]]) -> str:
        lines = [self._open_tag()]
        for row in grid:
            cells = "".join(f"<td>{self._cell(v)}</td>" for v in row)
            lines.append(f"<tr>{cells}</tr>")
        lines.append("</table>")
        return "\n".join(lines)
