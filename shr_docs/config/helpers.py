"""Utility helpers shared by the exporter configuration loader."""

from __future__ import annotations

from .models import OUTPUT_FORMATS, ExportConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_formats(
    value: str | list[object] | None, default: tuple[str, ...]
) -> tuple[str, ...]:
    """Normalize the configured output formats, rejecting unknown names."""
    if value is None:
        return default
    if isinstance(value, str):
        value = [segment for segment in value.replace(",", " ").split() if segment]
    formats: list[str] = []
    for segment in value:
        name = str(segment).strip().lower()
        if name not in OUTPUT_FORMATS:
            known = ", ".join(OUTPUT_FORMATS)
            msg = f"Unknown output format '{name}'. Known formats: {known}"
            raise ExportConfigError(msg)
        if name not in formats:
            formats.append(name)
    if not formats:
        msg = "At least one output format must be configured."
        raise ExportConfigError(msg)
    return tuple(formats)


__all__ = ["_optional_str", "_parse_formats"]
