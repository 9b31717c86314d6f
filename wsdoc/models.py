"""Dataclasses describing parsed web-service documentation.

A :class:`DocumentationRecord` is created empty when an annotated block starts
and is filled in by the directive handlers in :mod:`wsdoc.directives`. Field
listings are flattened :class:`FieldDescriptor` rows produced by
:mod:`wsdoc.structs`, and URL placeholders are collected into
:class:`URLDefinition` entries by :mod:`wsdoc.urls`.

Example
-------
>>> from wsdoc.models import DocumentationRecord
>>> record = DocumentationRecord()
>>> record.methods
[]
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from markupsafe import Markup


@dc.dataclass(slots=True)
class URLTerm:
    """A colon-prefixed part of a URL and its definition."""

    term: str
    definition: str = ""


@dc.dataclass(slots=True)
class URLDefinition:
    """A documented URL and the placeholders that need explanation.

    Attributes
    ----------
    url : str
        The URL exactly as written after the ``@url`` directive.
    parts : list[URLTerm]
        Path placeholders followed by query terms, in first-seen order.
    """

    url: str
    parts: list[URLTerm] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class FieldDescriptor:
    """One flattened row of a payload type's field listing.

    Attributes
    ----------
    field : Markup
        Display path: one indentation unit per nesting level followed by the
        dotted path of the field.
    data_type : str
        Base type name, prefixed with ``[]`` for slices.
    definition : str
        Glossary definition for the field; empty when unknown.
    optional : bool
        Reserved; never set by the introspector.
    path : str
        Dotted path without indentation markup.
    depth : int
        Nesting level, ``1`` for top-level fields.
    """

    field: Markup
    data_type: str
    definition: str = ""
    optional: bool = False
    path: str = ""
    depth: int = 1


@dc.dataclass(slots=True)
class DocumentationRecord:
    """Structured description of a single web-service endpoint."""

    title: str = ""
    slug: str = ""
    filename: str = ""
    urls: list[URLDefinition] = dc.field(default_factory=list)
    synopsis: str = ""
    methods: list[str] = dc.field(default_factory=list)
    description: Markup = dc.field(default_factory=Markup)
    input: list[FieldDescriptor] = dc.field(default_factory=list)
    input_example: str = ""
    response: list[FieldDescriptor] = dc.field(default_factory=list)
    response_example: str = ""
    source_path: Path | None = None


@dc.dataclass(slots=True)
class TableOfContents:
    """Accumulate completed records for the index page."""

    entries: list[DocumentationRecord] = dc.field(default_factory=list)

    def add(self, record: DocumentationRecord) -> None:
        """Append a completed record."""
        self.entries.append(record)

    def sorted_entries(self) -> list[DocumentationRecord]:
        """Return the records ordered by title."""
        return sorted(self.entries, key=lambda record: record.title)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "DocumentationRecord",
    "FieldDescriptor",
    "TableOfContents",
    "URLDefinition",
    "URLTerm",
]
