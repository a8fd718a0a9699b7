"""Load exporter configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str, _parse_formats
from .models import ExportConfig, ExportConfigError


def load_export_config(path: Path | None) -> ExportConfig:
    """Load the YAML configuration describing titles and output settings.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file. ``None`` returns the
        built-in defaults.

    Returns
    -------
    ExportConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    ExportConfigError
        If the document is not a mapping or a value is invalid.

    Examples
    --------
    >>> from shr_docs.config import load_export_config
    >>> load_export_config(None).title
    'Standard Health Record'
    """
    if path is None:
        return ExportConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ExportConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = ExportConfig()

    return ExportConfig(
        title=_optional_str(raw.get("title")) or defaults.title,
        entry_title=_optional_str(raw.get("entry_title")) or defaults.entry_title,
        namespace_title_prefix=_optional_str(raw.get("namespace_title_prefix"))
        or defaults.namespace_title_prefix,
        reserved_prefix=_optional_str(
            raw.get("reserved_prefix", defaults.reserved_prefix)
        )
        or "",
        stylesheet=_optional_str(raw.get("stylesheet")) or defaults.stylesheet,
        secondary_stylesheet=_optional_str(raw.get("secondary_stylesheet"))
        or defaults.secondary_stylesheet,
        output_dir=Path(raw.get("output_dir", defaults.output_dir)),
        formats=_parse_formats(raw.get("formats"), defaults.formats),
    )


__all__ = ["load_export_config"]
