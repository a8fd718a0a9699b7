"""Assemble the corpus-wide indexes and derive namespace titles.

Each namespace contributes a row to the full index and, when it declares
entries, to the entry index. Its links are balanced across three columns of
``ceil(n / 3)`` links each. A namespace with nothing to list is left out of
that index entirely.
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from shr_docs._constants import INDEX_COLUMNS

from .links import url_relative_to_base

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from shr_docs.model import DataElement

T = typ.TypeVar("T")


def namespace_title(namespace: str, reserved_prefix: str = "shr") -> str:
    """Return the display title for ``namespace``.

    >>> namespace_title("shr.core.lab")
    'Core:Lab'
    >>> namespace_title("us.core")
    'Us:Core'
    """
    if reserved_prefix and namespace.startswith(f"{reserved_prefix}."):
        namespace = namespace[len(reserved_prefix) + 1 :]
    return ":".join(part[:1].upper() + part[1:] for part in namespace.split("."))


@dc.dataclass(frozen=True, slots=True)
class DefinitionCounts:
    """Number of elements and of entry elements in a namespace."""

    element_count: int
    entry_count: int


def definition_counts(definitions: cabc.Iterable[DataElement]) -> DefinitionCounts:
    element_count = entry_count = 0
    for definition in definitions:
        element_count += 1
        if definition.is_entry:
            entry_count += 1
    return DefinitionCounts(element_count, entry_count)


def balance_columns(
    items: cabc.Sequence[T], columns: int = INDEX_COLUMNS
) -> list[list[T]]:
    """Split ``items`` into at most ``columns`` columns of ``ceil(n / columns)``.

    >>> [len(c) for c in balance_columns(list(range(7)))]
    [3, 3, 1]
    >>> balance_columns([])
    []
    """
    if not items:
        return []
    per_column = math.ceil(len(items) / columns)
    return [
        list(items[start : start + per_column])
        for start in range(0, len(items), per_column)
    ]


def namespace_index_block(
    namespace: str, title: str, definitions: cabc.Sequence[DataElement]
) -> str:
    """Render one namespace's heading and balanced link columns."""
    md = '\n<div class="row" markdown="1">\n'
    md += f"\n## [{title}]({url_relative_to_base(namespace)})\n"
    for column in balance_columns(definitions):
        md += '\n<div class="col-md-4" markdown="1">\n\n'
        for definition in column:
            name = definition.identifier.name
            md += f"- [{name}]({url_relative_to_base(namespace, name)})\n"
        md += "\n</div>\n"
    md += "\n</div>\n"
    return md


class IndexManager:
    """Accumulate the full index and the entry-only index side by side."""

    def __init__(self, title: str) -> None:
        self.index = f"# {title}\n"
        self.entry_index = f"# {title}\n"

    def append_namespace(
        self, namespace: str, title: str, definitions: cabc.Sequence[DataElement]
    ) -> DefinitionCounts:
        """Add ``namespace`` to each index that has something to list for it."""
        counts = definition_counts(definitions)
        if counts.element_count:
            self.index += namespace_index_block(namespace, title, definitions)
        if counts.entry_count:
            entries = [d for d in definitions if d.is_entry]
            self.entry_index += namespace_index_block(namespace, title, entries)
        return counts


__all__ = [
    "DefinitionCounts",
    "IndexManager",
    "balance_columns",
    "definition_counts",
    "namespace_index_block",
    "namespace_title",
]
