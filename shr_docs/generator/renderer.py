"""Convert exported Markdown fragments into HTML."""

from __future__ import annotations

import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any


class HtmlContentRenderer:
    """Render exported Markdown with the extensions its tables and indexes need."""

    def __init__(self, link_extension: Extension | None = None) -> None:
        """Initialize a renderer with an optional link extension.

        Parameters
        ----------
        link_extension : Extension, optional
            Markdown extension used when rewriting links; pass ``None`` to skip
            link rewriting.
        """
        self._link_extension = link_extension

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        extensions: list[Extension | str] = [
            "tables",
            "sane_lists",
            "md_in_html",
        ]
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(extensions=extensions)
        return md.convert(text)


__all__ = ["HtmlContentRenderer"]
