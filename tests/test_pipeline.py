"""End-to-end tests for the documentation pipeline.

These tests write annotated sources and glossary files into a temporary tree,
run :class:`wsdoc.pipeline.DocPipeline` over it and inspect the rendered HTML
with BeautifulSoup. They cover the reference page layout, the sorted index,
and the error policy: unreadable files and failed renders are logged and
skipped without aborting the run.
"""

from __future__ import annotations

import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from wsdoc.config import GeneratorConfig
from wsdoc.generator import ReferencePageBuilder
from wsdoc.pipeline import DocPipeline
from wsdoc.scanner import SourceRootError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

    from wsdoc.registry import TypeRegistry


@pytest.fixture
def source_tree(tmp_path: Path, annotated_source: str) -> Path:
    """Create a source tree with one annotated module and one test module."""
    root = tmp_path / "src"
    (root / "api").mkdir(parents=True)
    (root / "api" / "rentables.py").write_text(annotated_source, encoding="utf-8")
    (root / "api" / "test_rentables.py").write_text(annotated_source, encoding="utf-8")
    return root


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    """Return a config writing into a temp directory with a glossary source."""
    glossary_path = tmp_path / "glossary.csv"
    glossary_path.write_text(
        "BID,business unit identifier\nID,rentable id\nstatus,outcome\n",
        encoding="utf-8",
    )
    return GeneratorConfig(output_dir=tmp_path / "doc", glossary=[glossary_path])


@pytest.fixture
def pipeline(config: GeneratorConfig, registry: TypeRegistry) -> DocPipeline:
    """Return a pipeline using the payload registry."""
    return DocPipeline(config, registry=registry)


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_run_writes_pages_and_index(
    pipeline: DocPipeline, source_tree: Path, config: GeneratorConfig
) -> None:
    """Each block gets a page; the index comes last."""
    written = pipeline.run(source_tree)

    names = [path.name for path in written]
    assert names == ["searchrentables.html", "getrentable.html", "docs.html"], (
        f"unexpected written files {names!r}"
    )
    assert len(pipeline.toc) == 2, "expected test modules to be excluded"
    assert all(path.parent == config.output_dir for path in written), (
        "expected every artifact in the output directory"
    )


def test_reference_page_content(pipeline: DocPipeline, source_tree: Path) -> None:
    """The page shows methods, URL terms, glossary spans and field tables."""
    pipeline.run(source_tree)
    soup = _soup(pipeline.config.output_dir / "searchrentables.html")

    assert soup.select_one("h1.ws-title").get_text() == "Search Rentables", (
        "expected the record title as heading"
    )
    methods = [span.get_text() for span in soup.select(".ws-methods .method")]
    assert methods == ["POST"], f"unexpected methods {methods!r}"
    terms = [
        (row.select_one(".term").get_text(), row.select_one(".definition").get_text())
        for row in soup.select(".ws-url-terms tr")
    ]
    assert terms == [
        ("BID", "business unit identifier"),
        ("search", "free text"),
        ("max", "250"),
    ], f"unexpected URL terms {terms!r}"
    glossary_spans = soup.select(".ws-description span.glossary")
    assert [span.get_text() for span in glossary_spans] == ["BID"], (
        "expected the glossary term highlighted in the description"
    )
    response_rows = soup.select(".ws-response .ws-fields tbody tr")
    assert response_rows[0].select_one(".definition").get_text() == "outcome", (
        "expected field definitions from the loaded glossary"
    )
    example = soup.select_one(".ws-response div.codehilite")
    assert example is not None, "expected a highlighted response example"
    assert example.get("data-language") == "json", (
        f"expected a JSON example, got {example.get('data-language')!r}"
    )


def test_nested_fields_are_indented(pipeline: DocPipeline, source_tree: Path) -> None:
    """Nested field rows carry their depth and indentation."""
    pipeline.run(source_tree)
    soup = _soup(pipeline.config.output_dir / "getrentable.html")
    rows = soup.select(".ws-response .ws-fields tbody tr")
    assert rows[1].get("class") == ["depth-2"], (
        f"expected the second row nested, got {rows[1].get('class')!r}"
    )
    field_text = rows[1].select_one(".field").get_text()
    assert field_text == "\xa0" * 8 + "Address.street", (
        f"unexpected nested field text {field_text!r}"
    )


def test_repeated_runs_do_not_duplicate_index_entries(
    pipeline: DocPipeline, source_tree: Path
) -> None:
    """Each run starts from an empty table of contents."""
    pipeline.run(source_tree)
    pipeline.run(source_tree)

    assert len(pipeline.toc) == 2, f"expected 2 entries, got {len(pipeline.toc)}"
    soup = _soup(pipeline.config.index_path)
    titles = [cell.get_text(strip=True) for cell in soup.select(".ws-index td.title")]
    assert titles == ["Get Rentable", "Search Rentables"], (
        f"unexpected index titles {titles!r}"
    )


def test_index_is_sorted_by_title(pipeline: DocPipeline, source_tree: Path) -> None:
    """The index lists records alphabetically with links to their pages."""
    pipeline.run(source_tree)
    soup = _soup(pipeline.config.index_path)
    links = [
        (anchor.get_text(), anchor.get("href"))
        for anchor in soup.select(".ws-index td.title a")
    ]
    assert links == [
        ("Get Rentable", "getrentable.html"),
        ("Search Rentables", "searchrentables.html"),
    ], f"unexpected index links {links!r}"
    assert "Version 1.0" in soup.select_one(".meta").get_text(), (
        "expected the configured version on the index"
    )


def test_unreadable_files_are_skipped(
    pipeline: DocPipeline, source_tree: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A file that cannot be decoded is logged and skipped."""
    (source_tree / "broken.py").write_bytes(b"# wsdoc {\n\xff\xfe\n# wsdoc }\n")

    with caplog.at_level(logging.ERROR, logger="wsdoc.pipeline"):
        written = pipeline.run(source_tree)

    assert len(written) == 3, f"expected other files processed, got {written!r}"
    assert "broken.py" in caplog.text, "expected the unreadable file to be reported"


def test_render_failures_keep_records_in_index(
    pipeline: DocPipeline,
    source_tree: Path,
    mocker: MockerFixture,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A page that fails to render is reported but still indexed."""
    mocker.patch.object(
        ReferencePageBuilder, "run", side_effect=OSError("disk full")
    )

    with caplog.at_level(logging.ERROR, logger="wsdoc.pipeline"):
        written = pipeline.run(source_tree)

    assert [path.name for path in written] == ["docs.html"], (
        f"expected only the index to be written, got {written!r}"
    )
    assert len(pipeline.toc) == 2, "expected both records in the table of contents"
    assert "disk full" in caplog.text, "expected the render failure to be logged"


def test_untitled_blocks_are_indexed_without_page(
    pipeline: DocPipeline, caplog: pytest.LogCaptureFixture
) -> None:
    """A block without @title cannot be rendered but joins the index."""
    with caplog.at_level(logging.ERROR, logger="wsdoc.pipeline"):
        record, page = pipeline.process_block(["# @synopsis nameless"])

    assert page is None, "expected no page for an untitled record"
    assert record.synopsis == "nameless", "expected the record to be processed"
    assert pipeline.toc.entries == [record], "expected the record in the index"


def test_missing_glossary_is_not_fatal(
    tmp_path: Path, registry: TypeRegistry, source_tree: Path
) -> None:
    """Processing continues with an empty glossary."""
    config = GeneratorConfig(
        output_dir=tmp_path / "doc", glossary=[tmp_path / "absent.csv"]
    )
    pipeline = DocPipeline(config, registry=registry)

    written = pipeline.run(source_tree)

    assert len(written) == 3, f"expected all artifacts written, got {written!r}"
    assert len(pipeline.glossary) == 0, "expected an empty glossary"


def test_bad_root_is_fatal(pipeline: DocPipeline, tmp_path: Path) -> None:
    """A missing source root aborts the run."""
    with pytest.raises(SourceRootError):
        pipeline.run(tmp_path / "nowhere")
