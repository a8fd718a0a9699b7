"""Utilities for converting exported Markdown into standalone HTML pages."""

from .link_rewriter import PageLinkExtension
from .page import (
    HtmlExporter,
    PageWrapper,
    embed_in_html_page,
    export_to_html,
    path_to_base,
)
from .renderer import HtmlContentRenderer

__all__ = [
    "HtmlContentRenderer",
    "HtmlExporter",
    "PageLinkExtension",
    "PageWrapper",
    "embed_in_html_page",
    "export_to_html",
    "path_to_base",
]
