"""Persist an export tree as a directory of documents.

The layout mirrors the links the exporter emits: the two indexes sit at the
output root, each namespace ``a.b.c`` gets ``a/b/c/index<suffix>``, and each
definition gets ``a/b/c/<Name><suffix>`` beside it.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ._constants import ENTRY_INDEX_BASENAME, INDEX_BASENAME

if typ.TYPE_CHECKING:
    from .exporter import ExportTree


def namespace_dir(output_dir: Path, namespace: str) -> Path:
    """Return the directory holding ``namespace``'s documents."""
    return output_dir.joinpath(*namespace.split("."))


def write_export(tree: ExportTree, output_dir: Path, suffix: str) -> list[Path]:
    """Write every fragment of ``tree`` below ``output_dir``.

    Parameters
    ----------
    tree : ExportTree
        Rendered Markdown or HTML fragments.
    output_dir : Path
        Root directory; created when missing.
    suffix : str
        File extension including the dot, e.g. ``".md"``.

    Returns
    -------
    list[Path]
        Written paths: both indexes first, then each namespace page followed
        by its definitions.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    def _write(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        written.append(path)

    _write(output_dir / f"{INDEX_BASENAME}{suffix}", tree.index)
    _write(output_dir / f"{ENTRY_INDEX_BASENAME}{suffix}", tree.entry_index)
    for namespace, document in tree.namespaces.items():
        directory = namespace_dir(output_dir, namespace)
        _write(directory / f"{INDEX_BASENAME}{suffix}", document.index)
        for name, text in document.definitions.items():
            _write(directory / f"{name}{suffix}", text)
    return written


__all__ = ["namespace_dir", "write_export"]
