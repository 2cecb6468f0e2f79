"""Tests for path_filter module."""

import pytest

from pathtree.models import TreeOptions
from pathtree.path_filter import (
    InvalidPatternError,
    check_options,
    compile_patterns,
    filter_paths,
    parse_pattern_input,
)

PATHS = ["Cargo.toml", "README.md", "src/main.rs", "src/lib/tree_generator.rs"]


class TestParsePatternInput:
    def test_empty_string(self):
        assert parse_pattern_input("") == []

    def test_whitespace_only(self):
        assert parse_pattern_input("   ") == []

    def test_multiple_patterns(self):
        result = parse_pattern_input(r"\.py$, \.rs$, ^docs/")
        assert result == [r"\.py$", r"\.rs$", r"^docs/"]

    def test_ignores_empty_segments(self):
        result = parse_pattern_input(r"\.py$,,\.rs$,")
        assert result == [r"\.py$", r"\.rs$"]


class TestCompilePatterns:
    def test_compiles_valid(self):
        assert len(compile_patterns([r"\.py$", r"src/.*\.rs$"])) == 2

    def test_empty(self):
        assert compile_patterns([]) == []

    def test_reports_every_bad_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_patterns([r"[bad", r"\.py$", r"(unclosed"])
        errors = exc_info.value.errors
        assert len(errors) == 2
        assert "`[bad`" in errors[0]
        assert "`(unclosed`" in errors[1]

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="invalid regex"):
            compile_patterns([r"[bad"])


class TestCheckOptions:
    def test_valid(self):
        assert check_options(TreeOptions(include=[r"\.rs$"], exclude=["lib"])) == []

    def test_collects_include_and_exclude(self):
        errors = check_options(TreeOptions(include=["[a"], exclude=["[b"]))
        assert len(errors) == 2


class TestFilterPaths:
    def test_no_patterns_keeps_everything(self):
        assert filter_paths(PATHS, TreeOptions()) == PATHS

    def test_include_matches_anywhere(self):
        result = filter_paths(PATHS, TreeOptions(include=[r"lib/"]))
        assert result == ["src/lib/tree_generator.rs"]

    def test_exclude(self):
        result = filter_paths(PATHS, TreeOptions(exclude=[r"^src/lib/"]))
        assert result == ["Cargo.toml", "README.md", "src/main.rs"]

    def test_exclude_wins_over_include(self):
        options = TreeOptions(include=[r"^src/"], exclude=[r"main"])
        assert filter_paths(PATHS, options) == ["src/lib/tree_generator.rs"]

    def test_matches_without_trailing_newline(self):
        result = filter_paths(["a.py\n", "b.rs\n"], TreeOptions(include=[r"\.py$"]))
        assert result == ["a.py"]

    def test_bad_include_does_not_widen_filter(self):
        with pytest.raises(InvalidPatternError):
            filter_paths(["a.py", "b.rs"], TreeOptions(include=["[bad"]))
