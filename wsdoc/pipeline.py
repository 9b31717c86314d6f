"""High-level orchestration for web-service documentation generation.

:class:`DocPipeline` owns the state shared across a run: the glossary, the
type registry and the table of contents. It loads glossary sources, walks the
source tree, feeds each annotated block to the
:class:`~wsdoc.directives.DirectiveDispatcher`, renders a reference page per
record and finally the index page.

Errors inside a run are reported and skipped: an unreadable glossary source
leaves a partial glossary, an unreadable file is skipped, and a page that
fails to render still appears in the index. Only a bad source root aborts the
run.

Example
-------
>>> from pathlib import Path
>>> from wsdoc.config import load_generator_config
>>> from wsdoc.pipeline import DocPipeline
>>> config = load_generator_config(Path("wsdoc.yaml"))  # doctest: +SKIP
>>> DocPipeline(config).run(Path("src"))  # doctest: +SKIP
[PosixPath('doc/searchrentables.html'), PosixPath('doc/docs.html')]
"""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import TemplateError

from .directives import DirectiveDispatcher
from .docs_index import DocsIndexBuilder
from .generator import HtmlContentRenderer, ReferencePageBuilder
from .glossary import Glossary
from .models import DocumentationRecord, TableOfContents
from .registry import TypeRegistry
from .scanner import discover_sources, scan_file

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import GeneratorConfig

logger = logging.getLogger(__name__)


class DocPipeline:
    """Scan sources for annotated blocks and write their documentation."""

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        glossary: Glossary | None = None,
        registry: TypeRegistry | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the pipeline.

        Parameters
        ----------
        config : GeneratorConfig
            Resolved generator configuration.
        glossary : Glossary, optional
            Pre-populated glossary; when omitted an empty glossary is created
            and filled by :meth:`load_glossary`.
        registry : TypeRegistry, optional
            Type registry; defaults to the dataclasses of
            ``config.type_modules``.
        templates_dir : Path, optional
            Override for the Jinja templates directory.
        """
        self.config = config
        self.glossary = glossary if glossary is not None else Glossary()
        self.registry = (
            registry
            if registry is not None
            else TypeRegistry.from_modules(config.type_modules)
        )
        self.toc = TableOfContents()
        self.dispatcher = DirectiveDispatcher(
            self.glossary, self.registry, comment_marker=config.comment_marker
        )
        self.page_builder = ReferencePageBuilder(
            config.output_dir,
            HtmlContentRenderer(config.pygments_style),
            templates_dir=templates_dir,
        )
        self.index_builder = DocsIndexBuilder(
            config.index_path, version=config.version, templates_dir=templates_dir
        )

    def load_glossary(self) -> list[Path]:
        """Load the configured glossary sources; return those that failed."""
        return self.glossary.load_all(self.config.glossary)

    def process_block(
        self, lines: cabc.Sequence[str], source_path: Path | None = None
    ) -> tuple[DocumentationRecord, Path | None]:
        """Document one annotated block.

        Returns
        -------
        tuple[DocumentationRecord, Path | None]
            The record, which always joins the table of contents, and the
            written page or ``None`` when rendering failed.
        """
        record = self.dispatcher.process(lines, source_path=source_path)
        written: Path | None = None
        try:
            written = self.page_builder.run(record)
        except (OSError, TemplateError, ValueError) as exc:
            logger.error(
                "Error generating reference page for %r: %s", record.title, exc
            )
        self.toc.add(record)
        return record, written

    def process_file(self, path: Path) -> list[Path]:
        """Document every annotated block in ``path``; return written pages."""
        try:
            blocks = scan_file(
                path,
                marker=self.config.comment_marker,
                start=self.config.start_sentinel,
                end=self.config.end_sentinel,
            )
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error scanning file %s: %s", path, exc)
            return []
        written: list[Path] = []
        for block in blocks:
            if not block:
                continue
            _record, page = self.process_block(block, source_path=path)
            if page is not None:
                written.append(page)
        return written

    def write_index(self) -> Path | None:
        """Render the index page; ``None`` when it could not be written."""
        try:
            return self.index_builder.run(self.toc)
        except (OSError, TemplateError) as exc:
            logger.error("Error generating index page: %s", exc)
            return None

    def run(self, root: Path) -> list[Path]:
        """Document every annotated block below ``root``.

        Returns
        -------
        list[Path]
            Reference pages in processing order followed by the index page.

        Raises
        ------
        SourceRootError
            If ``root`` is not a directory.
        """
        self.toc = TableOfContents()
        self.load_glossary()
        sources = discover_sources(
            root, extensions=self.config.extensions, exclude=self.config.exclude
        )
        written: list[Path] = []
        for path in sources:
            written.extend(self.process_file(path))
        index_path = self.write_index()
        if index_path is not None:
            written.append(index_path)
        return written


__all__ = ["DocPipeline"]
