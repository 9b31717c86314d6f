"""Parse ``@url`` directives into documented URL definitions.

A documented URL marks the parts that need explaining with a colon::

    /v1/rentagr/:BUI/:RAID ? dt=:DATE & raid=:RAID

Path placeholders and colon-valued query parameters are looked up in the
glossary. Grid widgets also encode a whole request object in the query
string (``request={"search":"text","max":"250"}``); its keys are listed with
their literal values instead of glossary definitions.

Example
-------
>>> from wsdoc.glossary import Glossary
>>> from wsdoc.urls import parse_url
>>> url = parse_url("/v1/item/:ID?limit=:N", Glossary({"ID": "item id"}))
>>> [(part.term, part.definition) for part in url.parts]
[('ID', 'item id'), ('N', '')]
"""

from __future__ import annotations

import typing as typ

from .models import URLDefinition, URLTerm

if typ.TYPE_CHECKING:
    from .glossary import Glossary

REQUEST_OBJECT_PREFIX = "request={"
OBJECT_PUNCTUATION = "\"'{}<> \t"


def _placeholder_term(text: str) -> str:
    return text.replace(":", "").strip()


def _path_terms(path: str, glossary: Glossary) -> list[URLTerm]:
    terms: list[URLTerm] = []
    for segment in path.split("/"):
        if ":" not in segment:
            continue
        term = _placeholder_term(segment)
        terms.append(URLTerm(term=term, definition=glossary.define(term.lower())))
    return terms


def _request_object_terms(param: str) -> list[URLTerm]:
    """Return ``key: value`` pairs from a flat ``request={...}`` parameter."""
    terms: list[URLTerm] = []
    for piece in param[len(REQUEST_OBJECT_PREFIX) :].split(","):
        key, sep, value = piece.partition(":")
        key = key.strip(OBJECT_PUNCTUATION)
        if not sep or not key:
            continue
        terms.append(URLTerm(term=key, definition=value.strip(OBJECT_PUNCTUATION)))
    return terms


def _query_terms(query: str, glossary: Glossary) -> list[URLTerm]:
    terms: list[URLTerm] = []
    for raw_param in query.split("&"):
        param = raw_param.strip()
        if param.startswith(REQUEST_OBJECT_PREFIX):
            terms.extend(_request_object_terms(param))
            continue
        _name, sep, value = param.partition("=")
        if not sep or ":" not in value:
            continue
        term = _placeholder_term(value)
        terms.append(URLTerm(term=term, definition=glossary.define(term.lower())))
    return terms


def parse_url(text: str, glossary: Glossary) -> URLDefinition:
    """Build a :class:`URLDefinition` from the text following ``@url``.

    Parameters
    ----------
    text : str
        URL text. Only the first ``?`` separates the path from the
        query string.
    glossary : Glossary
        Glossary used to define placeholders.

    Returns
    -------
    URLDefinition
        The trimmed URL with path terms followed by query terms.
    """
    url = text.strip()
    path, sep, query = url.partition("?")
    parts = _path_terms(path, glossary)
    if sep:
        parts.extend(_query_terms(query, glossary))
    return URLDefinition(url=url, parts=parts)


__all__ = ["parse_url"]
