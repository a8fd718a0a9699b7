"""Export a specification into a tree of Markdown fragments.

:class:`MarkdownExporter` walks the namespaces in model order, renders each
definition with :class:`~shr_docs.exporter.definitions.DefinitionRenderer`,
stitches the namespace pages together, and feeds the two corpus-wide indexes.

Example
-------
>>> from shr_docs.model import Namespace, Specifications
>>> tree = export_to_markdown(Specifications([Namespace("shr.empty")]))
>>> tree.index
'# Standard Health Record\\n'
>>> tree.namespaces["shr.empty"].index
'# Empty'
"""

from __future__ import annotations

import typing as typ

from shr_docs.config import ExportConfig

from .definitions import DefinitionRenderer
from .index import IndexManager, namespace_title
from .models import ExportTree, NamespaceDocument

if typ.TYPE_CHECKING:
    from shr_docs.model import DataElement, Namespace, Specifications


class MarkdownExporter:
    """Render every namespace and definition of a specification."""

    def __init__(
        self, specifications: Specifications, config: ExportConfig | None = None
    ) -> None:
        self.specifications = specifications
        self.config = config or ExportConfig()
        self.definitions = DefinitionRenderer(specifications)

    def export(self) -> ExportTree:
        """Return the Markdown tree for the whole specification."""
        indexes = IndexManager(self.config.title)
        namespaces: dict[str, NamespaceDocument] = {}
        for namespace in self.specifications.namespaces:
            document, definitions = self.export_namespace(namespace)
            indexes.append_namespace(
                namespace.namespace, self.title(namespace.namespace), definitions
            )
            namespaces[namespace.namespace] = document
        return ExportTree(
            index=indexes.index,
            entry_index=indexes.entry_index,
            namespaces=namespaces,
        )

    def export_namespace(
        self, namespace: Namespace
    ) -> tuple[NamespaceDocument, list[DataElement]]:
        """Render one namespace page and its per-definition fragments.

        Returns the document together with the definitions in the order they
        were rendered, which is the order the indexes list them in.
        """
        ns = namespace.namespace
        definitions = sorted(
            self.specifications.by_namespace(ns), key=lambda d: d.identifier.name
        )
        page = f"# {self.title(ns)}"
        fragments: dict[str, str] = {}
        for definition in definitions:
            fragment = self.definitions.render(definition, ns)
            fragments[definition.identifier.name] = fragment
            # Same-page links only need the anchor
            page += f"\n\n{fragment}".replace("(index.md#", "(#")
        return NamespaceDocument(index=page, definitions=fragments), definitions

    def title(self, namespace: str) -> str:
        return namespace_title(namespace, self.config.reserved_prefix)


def export_to_markdown(
    specifications: Specifications, config: ExportConfig | None = None
) -> ExportTree:
    """Render ``specifications`` into a tree of Markdown fragments."""
    return MarkdownExporter(specifications, config).export()


__all__ = ["MarkdownExporter", "export_to_markdown"]
