"""Helpers for rewriting links between exported Markdown documents."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit, urlunsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from shr_docs._constants import HTML_SUFFIX, MARKDOWN_SUFFIX

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class PageLinkExtension(Extension):
    """Point links at rendered pages instead of their Markdown sources.

    Insert this extension into a ``markdown.Markdown`` instance so that
    relative links such as ``../base/index.md#Entry`` become
    ``../base/index.html#Entry`` in the generated HTML. Absolute URLs and
    bare fragments are left alone.
    """

    def __init__(
        self, source_suffix: str = MARKDOWN_SUFFIX, target_suffix: str = HTML_SUFFIX
    ) -> None:
        super().__init__()
        self.source_suffix = source_suffix
        self.target_suffix = target_suffix

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the page-link treeprocessor on the Markdown instance."""
        processor = PageLinkTreeprocessor(md, self.source_suffix, self.target_suffix)
        md.treeprocessors.register(processor, "shr_page_links", 15)


class PageLinkTreeprocessor(Treeprocessor):
    """Swap the document suffix of relative links in the parsed tree."""

    def __init__(self, md: Markdown, source_suffix: str, target_suffix: str) -> None:
        super().__init__(md)
        self.source_suffix = source_suffix
        self.target_suffix = target_suffix

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self._rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return ``target`` with its document suffix swapped, when applicable."""
        if not target or target.startswith(("#", "//")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc or not parsed.path:
            return None
        stem, ext = posixpath.splitext(parsed.path)
        if ext != self.source_suffix:
            return None
        return urlunsplit(
            ("", "", f"{stem}{self.target_suffix}", parsed.query, parsed.fragment)
        )


__all__ = ["PageLinkExtension", "PageLinkTreeprocessor"]
