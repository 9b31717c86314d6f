"""Find annotated blocks in a source tree.

Sources are walked in sorted order so repeated runs see blocks in the same
sequence. Within a file, every line strictly between a start sentinel comment
(``# wsdoc {``) and the next end sentinel comment (``# wsdoc }``) belongs to
one block; a block left open at the end of a file is discarded.
"""

from __future__ import annotations

import fnmatch
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_COMMENT_MARKER, END_SENTINEL, START_SENTINEL

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SourceRootError(FileNotFoundError):
    """Raised when the source root cannot be traversed."""


def is_comment_containing(
    line: str, target: str, marker: str = DEFAULT_COMMENT_MARKER
) -> bool:
    """Return ``True`` when ``line`` is a comment whose text starts with ``target``."""
    _code, sep, comment = line.partition(marker)
    if not sep:
        return False
    return comment.strip().startswith(target)


def extract_blocks(
    lines: cabc.Iterable[str],
    *,
    marker: str = DEFAULT_COMMENT_MARKER,
    start: str = START_SENTINEL,
    end: str = END_SENTINEL,
) -> cabc.Iterator[list[str]]:
    """Yield the lines enclosed by each start/end sentinel pair."""
    block: list[str] | None = None
    for line in lines:
        if block is None:
            if is_comment_containing(line, start, marker):
                block = []
            continue
        if is_comment_containing(line, end, marker):
            yield block
            block = None
            continue
        block.append(line)


def _is_excluded(path: Path, exclude: cabc.Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(path.name, pattern) for pattern in exclude)


def discover_sources(
    root: Path,
    *,
    extensions: cabc.Sequence[str] = (".py",),
    exclude: cabc.Sequence[str] = (),
) -> list[Path]:
    """Return candidate source files below ``root`` in sorted order.

    Parameters
    ----------
    root : Path
        Directory to walk recursively.
    extensions : Sequence[str], optional
        File suffixes to include (for example ``".py"``).
    exclude : Sequence[str], optional
        Glob patterns matched against file names to skip (for example
        ``"test_*.py"``).

    Returns
    -------
    list[Path]
        Matching files sorted by path.

    Raises
    ------
    SourceRootError
        If ``root`` does not exist or is not a directory.
    """
    if not root.is_dir():
        msg = f"Source root '{root}' is not a directory."
        raise SourceRootError(msg)
    suffixes = tuple(extensions)
    return sorted(
        path
        for path in root.rglob("*")
        if path.is_file()
        and path.name.endswith(suffixes)
        and not _is_excluded(path, exclude)
    )


def scan_file(
    path: Path,
    *,
    marker: str = DEFAULT_COMMENT_MARKER,
    start: str = START_SENTINEL,
    end: str = END_SENTINEL,
) -> list[list[str]]:
    """Read ``path`` and return its annotated blocks.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnicodeDecodeError
        If the file is not UTF-8 encoded.
    """
    text = path.read_text(encoding="utf-8")
    return list(
        extract_blocks(text.splitlines(), marker=marker, start=start, end=end)
    )


__all__ = [
    "SourceRootError",
    "discover_sources",
    "extract_blocks",
    "is_comment_containing",
    "scan_file",
]
