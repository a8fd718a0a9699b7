"""Typed dataclasses describing exporter configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_SECONDARY_STYLESHEET = (
    "https://maxcdn.bootstrapcdn.com/bootstrap/3.3.7/css/bootstrap.min.css"
)
OUTPUT_FORMATS = ("markdown", "html")


class ExportConfigError(ValueError):
    """Raised when the exporter configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ExportConfig:
    """Titles, stylesheets, and output settings shared by every export.

    Attributes
    ----------
    title : str
        Heading of both index pages and the HTML title of the full index.
    entry_title : str
        HTML title of the entry-only index page.
    namespace_title_prefix : str
        Prefix for namespace page titles, e.g. ``"SHR: Core"``.
    reserved_prefix : str
        Leading namespace segment stripped when deriving display titles.
    stylesheet : str
        Stylesheet filename located at the root of the output tree.
    secondary_stylesheet : str
        Absolute stylesheet URL linked from every page.
    output_dir : Path
        Directory the CLI writes rendered files into.
    formats : tuple[str, ...]
        Output formats to write (``"markdown"`` and/or ``"html"``).
    """

    title: str = "Standard Health Record"
    entry_title: str = "Standard Health Record Entries"
    namespace_title_prefix: str = "SHR"
    reserved_prefix: str = "shr"
    stylesheet: str = "shr-github-markdown.css"
    secondary_stylesheet: str = DEFAULT_SECONDARY_STYLESHEET
    output_dir: Path = Path("out")
    formats: tuple[str, ...] = OUTPUT_FORMATS


__all__ = [
    "DEFAULT_SECONDARY_STYLESHEET",
    "OUTPUT_FORMATS",
    "ExportConfig",
    "ExportConfigError",
]
