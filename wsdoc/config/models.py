"""Typed dataclasses describing wsdoc generator configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_COMMENT_MARKER,
    DEFAULT_VERSION,
    END_SENTINEL,
    INDEX_FILENAME,
    START_SENTINEL,
)


class ConfigError(ValueError):
    """Raised when the generator configuration is invalid."""


@dc.dataclass(slots=True)
class GeneratorConfig:
    """A fully resolved generator configuration.

    Attributes
    ----------
    output_dir : Path
        Directory receiving one page per documented endpoint and the index.
    index_filename : str
        Name of the index page inside ``output_dir``.
    version : str
        Version label shown on the index page.
    pygments_style : str
        Pygments style used to highlight example payloads.
    comment_marker : str
        Text introducing a comment in scanned sources.
    start_sentinel : str
        Comment text opening an annotated block.
    end_sentinel : str
        Comment text closing an annotated block.
    extensions : list[str]
        Suffixes of files to scan.
    exclude : list[str]
        File name globs to skip.
    glossary : list[Path]
        Glossary CSV sources, loaded in order.
    type_modules : list[str]
        Dotted module names whose dataclasses form the type registry.
    """

    output_dir: Path = Path("doc")
    index_filename: str = INDEX_FILENAME
    version: str = DEFAULT_VERSION
    pygments_style: str = "monokai"
    comment_marker: str = DEFAULT_COMMENT_MARKER
    start_sentinel: str = START_SENTINEL
    end_sentinel: str = END_SENTINEL
    extensions: list[str] = dc.field(default_factory=lambda: [".py"])
    exclude: list[str] = dc.field(default_factory=lambda: ["test_*.py", "*_test.py"])
    glossary: list[Path] = dc.field(default_factory=list)
    type_modules: list[str] = dc.field(default_factory=list)

    @property
    def index_path(self) -> Path:
        """Return the path of the index page."""
        return self.output_dir / self.index_filename


__all__ = ["ConfigError", "GeneratorConfig"]
