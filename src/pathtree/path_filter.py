"""Regex include/exclude filtering of input paths."""

from __future__ import annotations

import re
from typing import Iterable

from pathtree.models import TreeOptions
from pathtree.path_parser import strip_newline


class InvalidPatternError(ValueError):
    """Raised when one or more filter patterns are not valid regexes."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("invalid regex: " + "; ".join(errors))


def parse_pattern_input(raw: str) -> list[str]:
    """Turn ``"\\.py$, ^src/"`` into ``["\\.py$", "^src/"]``."""
    return [p.strip() for p in (raw or "").split(",") if p.strip()]


def compile_patterns(patterns: list[str]) -> list[re.Pattern[str]]:
    """Compile every pattern, reporting all broken ones at once.

    Raises InvalidPatternError instead of dropping bad patterns, since a
    dropped include pattern would widen the filter to every path.
    """
    compiled: list[re.Pattern[str]] = []
    errors: list[str] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as exc:
            errors.append(f"`{p}`: {exc}")
    if errors:
        raise InvalidPatternError(errors)
    return compiled


def check_options(options: TreeOptions) -> list[str]:
    """Return the error messages for both pattern lists of *options*."""
    errors: list[str] = []
    for patterns in (options.include, options.exclude):
        try:
            compile_patterns(patterns)
        except InvalidPatternError as exc:
            errors.extend(exc.errors)
    return errors


def filter_paths(paths: Iterable[str], options: TreeOptions) -> list[str]:
    """Keep lines that match an include pattern (if any) and no exclude pattern.

    Patterns use `re.search` against the line without its trailing newline.
    """
    include = compile_patterns(options.include)
    exclude = compile_patterns(options.exclude)

    kept: list[str] = []
    for raw in paths:
        path = strip_newline(raw)
        if include and not any(pat.search(path) for pat in include):
            continue
        if any(pat.search(path) for pat in exclude):
            continue
        kept.append(path)
    return kept
