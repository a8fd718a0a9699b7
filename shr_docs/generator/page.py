"""Wrap rendered fragments into standalone HTML pages.

:class:`PageWrapper` knows nothing about how fragments are produced: it takes
an HTML body, a title, and optionally the namespace the page lives in, and
returns a complete document whose stylesheet link climbs one directory per
namespace segment. :func:`export_to_html` converts a whole Markdown
:class:`~shr_docs.exporter.ExportTree` into a tree of the same shape.

Example
-------
>>> from shr_docs.generator import PageWrapper
>>> page = PageWrapper().embed("SHR: Core", "<p>Hi</p>", "shr.core")
>>> '<link rel="stylesheet" href="../../shr-github-markdown.css">' in page
True
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from shr_docs.config import ExportConfig
from shr_docs.exporter import ExportTree, NamespaceDocument, export_to_markdown
from shr_docs.exporter.index import namespace_title

from .link_rewriter import PageLinkExtension
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from shr_docs.model import Specifications


def path_to_base(namespace: str | None) -> str:
    """Return the ``../`` prefix leading from a namespace directory to the root.

    >>> path_to_base("shr.core")
    '../../'
    >>> path_to_base(None)
    ''
    """
    if not namespace:
        return ""
    return "../" * len(namespace.split("."))


class PageWrapper:
    """Render the standalone page template around converted HTML bodies."""

    def __init__(
        self, config: ExportConfig | None = None, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the wrapper.

        Parameters
        ----------
        config : ExportConfig, optional
            Supplies the stylesheet names; defaults to :class:`ExportConfig`.
        templates_dir : Path, optional
            Directory containing ``page.jinja``. Defaults to the
            ``shr_docs/templates`` directory when ``None``.
        """
        self.config = config or ExportConfig()
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def embed(self, title: str, body: str, namespace: str | None = None) -> str:
        """Return a complete HTML page containing ``body``."""
        return self.template.render(
            title=title,
            body=body,
            path_to_base=path_to_base(namespace),
            stylesheet=self.config.stylesheet,
            secondary_stylesheet=self.config.secondary_stylesheet,
        )


class HtmlExporter:
    """Convert a Markdown export tree into wrapped HTML pages."""

    def __init__(
        self,
        config: ExportConfig | None = None,
        *,
        renderer: HtmlContentRenderer | None = None,
        wrapper: PageWrapper | None = None,
    ) -> None:
        self.config = config or ExportConfig()
        self.renderer = renderer or HtmlContentRenderer(
            link_extension=PageLinkExtension()
        )
        self.wrapper = wrapper or PageWrapper(self.config)

    def convert(self, tree: ExportTree) -> ExportTree:
        """Return an HTML tree with the same shape as the Markdown ``tree``."""
        namespaces: dict[str, NamespaceDocument] = {}
        for ns, document in tree.namespaces.items():
            title = f"{self.config.namespace_title_prefix}: {self._title(ns)}"
            namespaces[ns] = NamespaceDocument(
                index=self._page(title, document.index, ns),
                definitions={
                    name: self._page(name, text, ns)
                    for name, text in document.definitions.items()
                },
            )
        return ExportTree(
            index=self._page(self.config.title, tree.index),
            entry_index=self._page(self.config.entry_title, tree.entry_index),
            namespaces=namespaces,
        )

    def _page(self, title: str, markdown: str, namespace: str | None = None) -> str:
        return self.wrapper.embed(title, self.renderer.markdown(markdown), namespace)

    def _title(self, namespace: str) -> str:
        return namespace_title(namespace, self.config.reserved_prefix)


def embed_in_html_page(
    title: str,
    body: str,
    namespace: str | None = None,
    config: ExportConfig | None = None,
) -> str:
    """Wrap ``body`` in a standalone page placed in ``namespace``'s directory."""
    return PageWrapper(config).embed(title, body, namespace)


def export_to_html(
    specifications: Specifications, config: ExportConfig | None = None
) -> ExportTree:
    """Render ``specifications`` into a tree of standalone HTML pages."""
    markdown_tree = export_to_markdown(specifications, config)
    return HtmlExporter(config).convert(markdown_tree)


__all__ = [
    "HtmlExporter",
    "PageWrapper",
    "embed_in_html_page",
    "export_to_html",
    "path_to_base",
]
