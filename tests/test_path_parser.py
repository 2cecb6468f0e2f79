"""Tests for path_parser module."""

import pytest

from pathtree.path_parser import parse_paths, split_path, strip_newline


class TestStripNewline:
    def test_lf(self):
        assert strip_newline("a/b\n") == "a/b"

    def test_crlf(self):
        assert strip_newline("a/b\r\n") == "a/b"

    def test_only_one_newline_removed(self):
        assert strip_newline("a\n\n") == "a\n"

    def test_no_newline(self):
        assert strip_newline("a/b") == "a/b"


class TestSplitPath:
    def test_simple(self):
        assert split_path("src/lib/tree_generator.rs") == ["src", "lib", "tree_generator.rs"]

    def test_single_segment(self):
        assert split_path("x") == ["x"]

    def test_extra_separators(self):
        assert split_path("/a//b/") == split_path("a/b") == ["a", "b"]

    def test_trailing_newline(self):
        assert split_path("a/b\n") == ["a", "b"]

    def test_empty_line(self):
        assert split_path("") == []
        assert split_path("\n") == []

    def test_separator_only(self):
        assert split_path("///") == []

    def test_dots_are_literal(self):
        assert split_path("./a/../b") == [".", "a", "..", "b"]

    def test_spaces_are_kept(self):
        assert split_path(" a / b ") == [" a ", " b "]

    def test_custom_separator(self):
        assert split_path("C:\\Users\\me", "\\") == ["C:", "Users", "me"]
        assert split_path("a/b", "\\") == ["a/b"]

    def test_multi_char_separator(self):
        assert split_path("a::b::::c", "::") == ["a", "b", "c"]

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            split_path("a/b", "")


class TestParsePaths:
    def test_skips_blank_lines(self):
        lines = ["a/b\n", "\n", "/\n", "c\n"]
        assert list(parse_paths(lines)) == [["a", "b"], ["c"]]

    def test_empty_input(self):
        assert list(parse_paths([])) == []
