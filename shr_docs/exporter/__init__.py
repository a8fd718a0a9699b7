"""Render a specification model into cross-linked Markdown fragments."""

from .definitions import DefinitionRenderer
from .index import IndexManager, balance_columns, namespace_title
from .links import concept_markdown, url_relative_to_base, url_relative_to_namespace
from .markdown import MarkdownExporter, export_to_markdown
from .models import ExportTree, NamespaceDocument
from .values import ValueRenderer, cardinality_text

__all__ = [
    "DefinitionRenderer",
    "ExportTree",
    "IndexManager",
    "MarkdownExporter",
    "NamespaceDocument",
    "ValueRenderer",
    "balance_columns",
    "cardinality_text",
    "concept_markdown",
    "export_to_markdown",
    "namespace_title",
    "url_relative_to_base",
    "url_relative_to_namespace",
]
