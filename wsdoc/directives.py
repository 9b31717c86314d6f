"""Turn the comment lines of one annotated block into a documentation record.

Each comment line inside a ``wsdoc { ... wsdoc }`` block may start with a
directive keyword::

    # @title        Search Rentables
    # @url          /v1/rentables/:BID?request={"search":"text","max":"250"}
    # @synopsis     Search rentables in a business
    # @method       POST
    # @description  Returns the rentables of :BID that match the search.
    # @input        SearchRequest
    # @response     SearchResponse

The first whitespace-delimited token of the comment text is matched
case-insensitively against the known keywords; lines without a comment marker
or a known keyword are ignored. Handlers never raise for malformed content:
whatever cannot be understood leaves the record field at its zero value.

Example
-------
>>> from wsdoc.directives import DirectiveDispatcher
>>> from wsdoc.glossary import Glossary
>>> from wsdoc.registry import TypeRegistry
>>> dispatcher = DirectiveDispatcher(Glossary(), TypeRegistry())
>>> record = dispatcher.process(["# @title My Service", "# @method get"])
>>> (record.slug, record.filename, record.methods)
('myservice', 'myservice.html', ['GET'])
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from ._constants import DEFAULT_COMMENT_MARKER, PAGE_SUFFIX
from .examples import generate_example
from .glossary import highlight_terms
from .models import DocumentationRecord
from .structs import resolve_type_reference
from .urls import parse_url

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .glossary import Glossary
    from .registry import TypeRegistry

Handler = typ.Callable[[str, DocumentationRecord], None]


def slugify_title(title: str) -> str:
    """Return the lowercase, space-free identifier derived from ``title``."""
    return title.lower().replace(" ", "")


class DirectiveDispatcher:
    """Dispatch directive lines to handlers that fill a DocumentationRecord."""

    def __init__(
        self,
        glossary: Glossary,
        registry: TypeRegistry,
        *,
        comment_marker: str = DEFAULT_COMMENT_MARKER,
    ) -> None:
        """Initialize the dispatcher.

        Parameters
        ----------
        glossary : Glossary
            Read-only glossary used for descriptions, URL terms and fields.
        registry : TypeRegistry
            Types that ``@input`` and ``@response`` may reference.
        comment_marker : str, optional
            Text that introduces a comment in the scanned sources.
        """
        self.glossary = glossary
        self.registry = registry
        self.comment_marker = comment_marker
        self._handlers: dict[str, Handler] = {
            "@title": self._handle_title,
            "@url": self._handle_url,
            "@synopsis": self._handle_synopsis,
            "@method": self._handle_method,
            "@description": self._handle_description,
            "@desc": self._handle_description,
            "@input": self._handle_input,
            "@response": self._handle_response,
        }

    def match_directive(self, line: str) -> tuple[str, str] | None:
        """Return ``(keyword, remainder)`` for a directive line, else ``None``."""
        _code, marker, comment = line.partition(self.comment_marker)
        if not marker:
            return None
        words = comment.strip().split(maxsplit=1)
        if not words:
            return None
        keyword = words[0].lower()
        if keyword not in self._handlers:
            return None
        remainder = words[1].strip() if len(words) > 1 else ""
        return keyword, remainder

    def process(
        self, lines: cabc.Iterable[str], source_path: Path | None = None
    ) -> DocumentationRecord:
        """Build a DocumentationRecord from the lines of one annotated block."""
        record = DocumentationRecord(source_path=source_path)
        for line in lines:
            matched = self.match_directive(line)
            if matched is None:
                continue
            keyword, remainder = matched
            self._handlers[keyword](remainder, record)
        return record

    def _handle_title(self, text: str, record: DocumentationRecord) -> None:
        record.title = text
        record.slug = slugify_title(text)
        record.filename = record.slug + PAGE_SUFFIX

    def _handle_url(self, text: str, record: DocumentationRecord) -> None:
        record.urls.append(parse_url(text, self.glossary))

    def _handle_synopsis(self, text: str, record: DocumentationRecord) -> None:
        record.synopsis = text

    def _handle_method(self, text: str, record: DocumentationRecord) -> None:
        lowered = text.lower()
        if "get" in lowered:
            record.methods.append("GET")
        if "post" in lowered:
            record.methods.append("POST")

    def _handle_description(self, text: str, record: DocumentationRecord) -> None:
        highlighted = highlight_terms(text, self.glossary)
        if record.description:
            record.description = record.description + Markup(" ") + highlighted
        else:
            record.description = highlighted

    def _handle_input(self, text: str, record: DocumentationRecord) -> None:
        record.input = resolve_type_reference(text, self.registry, self.glossary)
        record.input_example = generate_example(text, self.registry)

    def _handle_response(self, text: str, record: DocumentationRecord) -> None:
        record.response = resolve_type_reference(text, self.registry, self.glossary)
        record.response_example = generate_example(text, self.registry)


__all__ = ["DirectiveDispatcher", "slugify_title"]
