"""Build and render the wsdoc index page.

This module takes the :class:`~wsdoc.models.TableOfContents` accumulated
while processing annotated blocks and produces ``doc/docs.html`` (or the
configured output path) listing every documented endpoint sorted by title,
with its synopsis, HTTP methods and a link to its reference page.

>>> from pathlib import Path
>>> from wsdoc.docs_index import DocsIndexBuilder
>>> from wsdoc.models import TableOfContents
>>> builder = DocsIndexBuilder(Path("doc/docs.html"), version="1.0")
>>> builder.run(TableOfContents())  # doctest: +SKIP
PosixPath('doc/docs.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_VERSION
from .generator.page_generator import DEFAULT_TEMPLATES_DIR, build_environment

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import TableOfContents


def format_timestamp(moment: dt.datetime) -> str:
    """Return ``moment`` as ``Jan 2, 2006  3:04PM UTC`` without zero padding."""
    hour = moment.hour % 12 or 12
    return (
        f"{moment:%b} {moment.day}, {moment:%Y}  {hour}:{moment:%M%p} {moment:%Z}"
    ).rstrip()


class DocsIndexBuilder:
    """Render a landing page enumerating the documented endpoints."""

    def __init__(
        self,
        output_path: Path,
        *,
        version: str = DEFAULT_VERSION,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the docs index builder.

        Parameters
        ----------
        output_path : Path
            Where the index HTML is written.
        version : str, optional
            Version label displayed on the page.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``wsdoc/templates`` directory when ``None``.
        """
        self.output_path = output_path
        self.version = version
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = build_environment(self.templates_dir)
        self.template = self.env.get_template("docs_index.jinja")

    def run(self, toc: TableOfContents) -> Path:
        """Render the index HTML file to the configured output path."""
        generated_at = dt.datetime.now(dt.UTC)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        context = {
            "entries": toc.sorted_entries(),
            "generated_at": generated_at,
            "date": format_timestamp(generated_at),
            "version": self.version,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        self.output_path.write_text(html, encoding="utf-8")
        return self.output_path


__all__ = ["DocsIndexBuilder", "format_timestamp"]
