"""Load and validate exporter configuration YAML.

The primary entry point is :func:`load_export_config`, which applies defaults
for omitted keys and returns an :class:`ExportConfig` consumed by the exporter,
the page wrapper, and the CLI.

Examples
--------
>>> from pathlib import Path
>>> from shr_docs.config import load_export_config
>>> config = load_export_config(Path("config/shr-docs.yaml"))  # doctest: +SKIP
>>> config.reserved_prefix  # doctest: +SKIP
'shr'
"""

from .loader import load_export_config
from .models import (
    DEFAULT_SECONDARY_STYLESHEET,
    OUTPUT_FORMATS,
    ExportConfig,
    ExportConfigError,
)

__all__ = [
    "DEFAULT_SECONDARY_STYLESHEET",
    "OUTPUT_FORMATS",
    "ExportConfig",
    "ExportConfigError",
    "load_export_config",
]
