"""Render Standard Health Record specifications into linked documentation.

This package turns a typed specification model into a tree of Markdown
fragments (one page per namespace, one fragment per definition, and two
balanced indexes) and optionally wraps them into standalone HTML pages.

Exports
-------
- ``export_to_markdown``: render a :class:`~shr_docs.model.Specifications`.
- ``export_to_html``: render and wrap every fragment as an HTML page.
- ``app`` / ``main``: the ``shr-docs`` Cyclopts application.

Examples
--------
>>> from shr_docs import export_to_markdown
>>> from shr_docs.model import Specifications
>>> export_to_markdown(Specifications()).index
'# Standard Health Record\\n'
"""

from __future__ import annotations

from .cli import app, main
from .exporter import export_to_markdown
from .generator import export_to_html

__all__ = ["app", "export_to_html", "export_to_markdown", "main"]
