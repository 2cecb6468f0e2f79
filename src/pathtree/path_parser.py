"""Splitting raw path lines into segments."""

from __future__ import annotations

from typing import Iterable, Iterator


def strip_newline(line: str) -> str:
    """Remove a single trailing ``\\n`` or ``\\r\\n``."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_path(line: str, separator: str = "/") -> list[str]:
    """Split one input line into its non-empty path segments.

    Leading, trailing and repeated separators produce no segments, so
    ``"/a//b/"`` and ``"a/b"`` both give ``["a", "b"]``. A blank line gives
    an empty list. Segments such as ``.`` and ``..`` are kept as-is.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    return [part for part in strip_newline(line).split(separator) if part]


def parse_paths(lines: Iterable[str], separator: str = "/") -> Iterator[list[str]]:
    """Yield the segment list of every line that has at least one segment."""
    for line in lines:
        segments = split_path(line, separator)
        if segments:
            yield segments
