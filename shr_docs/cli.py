"""Cyclopts CLI entrypoint for exporting specification documentation.

The ``shr-docs`` console script loads a YAML specification model, renders it
to Markdown and/or standalone HTML, and writes the document tree to disk.

Examples
--------
Export Markdown and HTML with the default settings:

>>> from shr_docs.cli import app
>>> app(["export", "--model", "model.yaml"])  # doctest: +SKIP

Export HTML only into a custom directory:

>>> app(
...     ["export", "--model", "model.yaml", "--format", "html", "--output-dir", "site"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import HTML_SUFFIX, MARKDOWN_SUFFIX
from .config import load_export_config
from .config.helpers import _parse_formats
from .exporter import export_to_markdown
from .generator import HtmlExporter
from .model import load_specifications
from .writer import write_export

app = App(name="shr-docs", config=cyclopts.config.Env("SHR_DOCS_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Export a specification model as Markdown and/or HTML pages.")
def export(
    *,
    model: typ.Annotated[
        Path, Parameter(help="Path to the YAML specification model")
    ],
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to exporter config", env_var="SHR_DOCS_CONFIG"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="SHR_DOCS_OUTPUT_DIR"),
    ] = None,
    format: typ.Annotated[  # noqa: A002
        list[str] | None,
        Parameter(help="Output format(s): markdown, html"),
    ] = None,
) -> None:
    """Export documentation for a specification model.

    Parameters
    ----------
    model : Path
        YAML file describing namespaces and data elements.
    config : Path or None, optional
        Exporter configuration file; built-in defaults are used when ``None``.
    output_dir : Path or None, optional
        Directory to write into, overriding the configured ``output_dir``.
    format : list[str] or None, optional
        Formats to write, overriding the configured ``formats``.

    Returns
    -------
    None
        Writes the rendered documents and prints the written paths.

    Raises
    ------
    FileNotFoundError
        If the model or an explicitly given config file does not exist.
    ModelError
        If the model file is structurally invalid.
    ExportConfigError
        If the configuration or requested formats are invalid.
    """
    export_config = load_export_config(config)
    formats = _parse_formats(format, export_config.formats)
    target_dir = output_dir or export_config.output_dir
    specifications = load_specifications(model)

    markdown_tree = export_to_markdown(specifications, export_config)
    written: list[Path] = []
    if "markdown" in formats:
        written.extend(write_export(markdown_tree, target_dir, MARKDOWN_SUFFIX))
    if "html" in formats:
        html_tree = HtmlExporter(export_config).convert(markdown_tree)
        written.extend(write_export(html_tree, target_dir, HTML_SUFFIX))
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``shr-docs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
