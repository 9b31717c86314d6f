"""Load generator configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _require_text, _resolve_paths, _string_list
from .models import ConfigError, GeneratorConfig


def load_generator_config(path: Path | None) -> GeneratorConfig:
    """Load the YAML configuration describing how documentation is generated.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration (for example
        ``wsdoc.yaml``). When ``None`` or when the file does not exist the
        defaults are returned.

    Returns
    -------
    GeneratorConfig
        Parsed configuration. Glossary paths are resolved relative to the
        directory holding the configuration file.

    Raises
    ------
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If a known key holds a value of the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from wsdoc.config import load_generator_config
    >>> load_generator_config(None).output_dir
    PosixPath('doc')
    """
    if path is None or not path.exists():
        return GeneratorConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = GeneratorConfig()

    extensions = _string_list("extensions", raw.get("extensions"))
    exclude = _string_list("exclude", raw.get("exclude"))
    glossary = _string_list("glossary", raw.get("glossary")) or []
    type_modules = _string_list("type_modules", raw.get("type_modules")) or []
    if extensions is not None and not extensions:
        msg = "'extensions' must list at least one file suffix."
        raise ConfigError(msg)

    return GeneratorConfig(
        output_dir=Path(raw.get("output_dir", base.output_dir)),
        index_filename=_require_text(
            "index_filename", raw.get("index_filename"), base.index_filename
        ),
        version=_require_text("version", raw.get("version"), base.version),
        pygments_style=_require_text(
            "pygments_style", raw.get("pygments_style"), base.pygments_style
        ),
        comment_marker=_require_text(
            "comment_marker", raw.get("comment_marker"), base.comment_marker
        ),
        start_sentinel=_require_text(
            "start_sentinel", raw.get("start_sentinel"), base.start_sentinel
        ),
        end_sentinel=_require_text(
            "end_sentinel", raw.get("end_sentinel"), base.end_sentinel
        ),
        extensions=extensions if extensions is not None else base.extensions,
        exclude=exclude if exclude is not None else base.exclude,
        glossary=_resolve_paths(glossary, path.parent),
        type_modules=type_modules,
    )


__all__ = ["load_generator_config"]
