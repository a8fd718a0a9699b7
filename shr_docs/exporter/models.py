"""Shared dataclasses describing an exported document tree."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class NamespaceDocument:
    """Rendered output for one namespace.

    Attributes
    ----------
    index : str
        The namespace page, containing every definition in name order.
    definitions : dict[str, str]
        One standalone fragment per definition, keyed by element name.
    """

    index: str
    definitions: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class ExportTree:
    """Rendered output for a whole specification.

    Attributes
    ----------
    index : str
        Index of every definition, grouped by namespace.
    entry_index : str
        Index restricted to entry definitions.
    namespaces : dict[str, NamespaceDocument]
        Per-namespace output keyed by dotted namespace, in model order.
    """

    index: str
    entry_index: str
    namespaces: dict[str, NamespaceDocument] = dc.field(default_factory=dict)


__all__ = ["ExportTree", "NamespaceDocument"]
