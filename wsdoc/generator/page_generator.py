"""Render one HTML reference page per documented endpoint.

:class:`ReferencePageBuilder` takes a finished
:class:`~wsdoc.models.DocumentationRecord` and writes
``<output_dir>/<record.filename>`` using the ``doc_page.jinja`` template. The
example payloads are highlighted with :class:`HtmlContentRenderer` and the
Pygments stylesheet is inlined into the page.

Example
-------
>>> from pathlib import Path
>>> from wsdoc.generator import HtmlContentRenderer, ReferencePageBuilder
>>> from wsdoc.models import DocumentationRecord
>>> builder = ReferencePageBuilder(Path("doc"), HtmlContentRenderer())
>>> record = DocumentationRecord(title="Ping", slug="ping", filename="ping.html")
>>> builder.run(record)  # doctest: +SKIP
PosixPath('doc/ping.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    from wsdoc.models import DocumentationRecord

    from .renderer import HtmlContentRenderer

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path) -> Environment:
    """Return the Jinja environment shared by the page builders."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class ReferencePageBuilder:
    """Render DocumentationRecords into standalone HTML pages."""

    def __init__(
        self,
        output_dir: Path,
        renderer: HtmlContentRenderer,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        output_dir : Path
            Directory receiving the rendered pages; created on demand.
        renderer : HtmlContentRenderer
            Renderer used to highlight example payloads.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.output_dir = output_dir
        self.renderer = renderer
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = build_environment(self.templates_dir)
        self.template = self.env.get_template("doc_page.jinja")

    def run(self, record: DocumentationRecord) -> Path:
        """Render ``record`` and return the path of the written page.

        Raises
        ------
        ValueError
            If the record has no title and therefore no filename.
        OSError
            If the page cannot be written.
        jinja2.TemplateError
            If the template fails to render.
        """
        if not record.filename:
            msg = "Cannot render a record without a @title."
            raise ValueError(msg)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        context = {
            "record": record,
            "input_example_html": self.renderer.example_block(record.input_example),
            "response_example_html": self.renderer.example_block(
                record.response_example
            ),
            "pygments_css": self.renderer.stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path = self.output_dir / record.filename
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["DEFAULT_TEMPLATES_DIR", "ReferencePageBuilder", "build_environment"]
