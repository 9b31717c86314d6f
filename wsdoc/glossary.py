r"""Domain glossary loading and glossary-aware text highlighting.

The glossary maps domain vocabulary (``BID``, ``RAID``, ...) to definitions.
It is filled once from one or more CSV sources before any annotated block is
processed and is only read afterwards. :func:`highlight_terms` uses it to wrap
colon-prefixed references in free text with a ``glossary`` span.

Example
-------
>>> from wsdoc.glossary import Glossary, highlight_terms
>>> glossary = Glossary({"BID": "business unit identifier"})
>>> str(highlight_terms("Returns rentables for :BID", glossary))
'Returns rentables for <span class="glossary">BID</span>'
"""

from __future__ import annotations

import csv
import logging
import re
import typing as typ

from markupsafe import Markup, escape

from ._constants import GLOSSARY_MARKUP

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(
    r"""
    [^\W\d]\w*                  # identifier (any Unicode letter)
    | \d+(?:\.\d+)?             # number
    | "(?:[^"\\\n]|\\.)*"       # double-quoted string
    | \S                        # any other single character
    """,
    re.VERBOSE,
)


class Glossary:
    """Term dictionary with exact-case membership and lenient definitions."""

    def __init__(self, terms: cabc.Mapping[str, str] | None = None) -> None:
        self._terms: dict[str, str] = {}
        self._folded: dict[str, str] = {}
        for term, definition in (terms or {}).items():
            self.add(term, definition)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def add(self, term: str, definition: str) -> None:
        """Record ``term``; a later definition replaces an earlier one."""
        self._terms[term] = definition
        self._folded[term.lower()] = term

    def load(self, path: Path) -> int:
        """Read ``term,definition`` rows from the CSV file at ``path``.

        Parameters
        ----------
        path : Path
            CSV source. Blank rows, rows without a term and rows whose first
            cell starts with ``#`` are skipped.

        Returns
        -------
        int
            Number of terms read from the file.

        Raises
        ------
        OSError
            If the file cannot be opened.
        csv.Error
            If the file is not valid CSV.
        UnicodeDecodeError
            If the file is not UTF-8 encoded.
        """
        count = 0
        with path.open("r", encoding="utf-8", newline="") as handle:
            for row in csv.reader(handle):
                if not row:
                    continue
                term = row[0].strip()
                if not term or term.startswith("#"):
                    continue
                definition = row[1].strip() if len(row) > 1 else ""
                self.add(term, definition)
                count += 1
        return count

    def load_all(self, paths: cabc.Iterable[Path]) -> list[Path]:
        """Load ``paths`` in order, returning the sources that failed to load."""
        failed: list[Path] = []
        for path in paths:
            try:
                count = self.load(path)
            except (OSError, csv.Error, UnicodeDecodeError) as exc:
                logger.error("Error loading glossary %s: %s", path, exc)
                failed.append(path)
                continue
            logger.info("loaded %d glossary terms from %s", count, path)
        return failed

    def is_term(self, word: str) -> bool:
        """Return ``True`` when ``word`` is a glossary term (case-sensitive)."""
        return word in self._terms

    def define(self, term: str) -> str:
        """Return the definition of ``term`` or an empty string.

        An exact match wins; otherwise the term is matched without regard to
        case so lowercased URL placeholders still resolve.
        """
        if term in self._terms:
            return self._terms[term]
        key = self._folded.get(term.lower())
        if key is None:
            return ""
        return self._terms[key]


def scan_tokens(text: str) -> list[str]:
    """Split ``text`` into identifiers, numbers, strings and punctuation."""
    return TOKEN_PATTERN.findall(text)


def highlight_terms(text: str, glossary: Glossary) -> Markup:
    """Rebuild ``text`` with colon-prefixed glossary terms highlighted.

    Tokens are re-joined with single spaces. A ``:`` consumes the token that
    follows it: a known term is wrapped in a ``glossary`` span, anything else
    is emitted as-is without the colon. A trailing ``:`` is kept literally.
    """
    pieces: list[Markup] = []
    tokens = iter(scan_tokens(text))
    for token in tokens:
        if token != ":":
            pieces.append(escape(token))
            continue
        following = next(tokens, None)
        if following is None:
            if pieces:
                pieces[-1] = pieces[-1] + ":"
            else:
                pieces.append(Markup(":"))
        elif glossary.is_term(following):
            pieces.append(Markup(GLOSSARY_MARKUP).format(term=following))
        else:
            pieces.append(escape(following))
    return Markup(" ").join(pieces)


__all__ = ["Glossary", "highlight_terms", "scan_tokens"]
