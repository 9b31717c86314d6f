"""Utility helpers shared by the wsdoc configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(key: str, value: object | None) -> list[str] | None:
    """Normalize a string or list of strings; ``None`` when unset."""
    match value:
        case None:
            return None
        case str() as text:
            return [text] if text.strip() else []
        case list() as items:
            return [str(item).strip() for item in items if str(item).strip()]
        case _:
            msg = f"'{key}' must be a string or a list of strings."
            raise ConfigError(msg)


def _require_text(key: str, value: object, default: str) -> str:
    """Return ``value`` as non-empty text, or ``default`` when unset."""
    if value is None:
        return default
    text = _optional_str(value)
    if text is None:
        msg = f"'{key}' must not be empty."
        raise ConfigError(msg)
    return text


def _resolve_paths(values: typ.Iterable[str], base_dir: Path) -> list[Path]:
    """Resolve relative paths against the directory of the config file."""
    resolved: list[Path] = []
    for value in values:
        path = Path(value).expanduser()
        resolved.append(path if path.is_absolute() else base_dir / path)
    return resolved


__all__ = ["_optional_str", "_require_text", "_resolve_paths", "_string_list"]
