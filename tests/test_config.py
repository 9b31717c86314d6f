"""Unit tests for generator configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from wsdoc.config import ConfigError, GeneratorConfig, load_generator_config


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    """Without a config file every default applies."""
    config = load_generator_config(tmp_path / "absent.yaml")
    assert config == GeneratorConfig(), f"unexpected config {config!r}"
    assert config.index_path == Path("doc/docs.html"), (
        f"unexpected index path {config.index_path!r}"
    )


def test_values_override_defaults(tmp_path: Path) -> None:
    """Configured values replace defaults and glossary paths become absolute."""
    config_path = tmp_path / "wsdoc.yaml"
    config_path.write_text(
        dedent(
            """
            output_dir: public/ws
            version: 2.1
            comment_marker: "//"
            extensions: .go
            exclude: ["*_test.go"]
            glossary:
              - glossary.csv
              - /etc/wsdoc/extra.csv
            type_modules: myapp.schemas
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )

    config = load_generator_config(config_path)

    assert config.output_dir == Path("public/ws"), "expected output_dir override"
    assert config.version == "2.1", f"expected version text, got {config.version!r}"
    assert config.comment_marker == "//", "expected comment marker override"
    assert config.extensions == [".go"], "expected a single suffix to become a list"
    assert config.exclude == ["*_test.go"], "expected exclude override"
    assert config.glossary == [
        tmp_path / "glossary.csv",
        Path("/etc/wsdoc/extra.csv"),
    ], f"unexpected glossary paths {config.glossary!r}"
    assert config.type_modules == ["myapp.schemas"], "expected type module list"
    assert config.start_sentinel == "wsdoc {", "expected default sentinels"


def test_invalid_shapes_raise_config_error(tmp_path: Path) -> None:
    """Lists of the wrong type are rejected."""
    config_path = tmp_path / "wsdoc.yaml"
    config_path.write_text("glossary:\n  nested: value\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_generator_config(config_path)


def test_empty_marker_is_rejected(tmp_path: Path) -> None:
    """Blank required strings are reported."""
    config_path = tmp_path / "wsdoc.yaml"
    config_path.write_text('comment_marker: "  "\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_generator_config(config_path)


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A list at the top level is a type error."""
    config_path = tmp_path / "wsdoc.yaml"
    config_path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_generator_config(config_path)
