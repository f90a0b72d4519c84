"""Unit tests for pattern compilation and pattern files."""

import re

import pytest

from src.reply_parser import (
    DEFAULT_QUOTE_HEADER_PATTERNS,
    PatternConfigError,
    ReplyParserError,
    load_pattern_file,
)
from src.reply_parser.patterns import compile_header_patterns, compile_pattern


class TestCompilePattern:
    """Tests for compile_pattern()."""

    def test_compiles_string_with_flags(self):
        pattern = compile_pattern(r"^a$", re.MULTILINE)
        assert pattern.search("x\na\ny") is not None

    def test_returns_compiled_pattern_unchanged(self):
        pattern = re.compile(r"abc")
        assert compile_pattern(pattern, re.MULTILINE) is pattern

    def test_invalid_regex(self):
        with pytest.raises(PatternConfigError) as exc_info:
            compile_pattern("[unclosed")
        assert "[unclosed" in str(exc_info.value)

    def test_error_is_a_reply_parser_error(self):
        with pytest.raises(ReplyParserError):
            compile_pattern(None)


class TestCompileHeaderPatterns:
    """Tests for compile_header_patterns()."""

    def test_none_returns_default_catalog(self):
        assert compile_header_patterns(None) is DEFAULT_QUOTE_HEADER_PATTERNS

    def test_preserves_order(self):
        patterns = compile_header_patterns([r"^(b)$", r"^(a)$"])
        assert [p.pattern for p in patterns] == [r"^(b)$", r"^(a)$"]

    def test_empty_catalog_allowed(self):
        assert compile_header_patterns([]) == ()


class TestDefaultCatalog:
    """Tests for the built-in reply header catalog."""

    def test_every_pattern_has_a_header_group(self):
        for pattern in DEFAULT_QUOTE_HEADER_PATTERNS:
            assert pattern.groups >= 1
            assert pattern.flags & re.MULTILINE


class TestLoadPatternFile:
    """Tests for load_pattern_file()."""

    def test_skips_comments_and_blank_lines(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text(
            "# Custom reply headers\n\n^(Begin forwarded message:)$\n   # indented comment\n^(\\d{4}[\\S\\s]*rta:)$\n",
            encoding="utf-8",
        )
        patterns = load_pattern_file(path)

        assert [p.pattern for p in patterns] == [
            r"^(Begin forwarded message:)$",
            r"^(\d{4}[\S\s]*rta:)$",
        ]
        assert all(p.flags & re.MULTILINE for p in patterns)

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text("^(On .+ wrote:)$\n", encoding="utf-8")
        assert len(load_pattern_file(str(path))) == 1

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(PatternConfigError) as exc_info:
            load_pattern_file(missing)
        assert exc_info.value.pattern == str(missing)

    def test_file_without_patterns(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("# nothing here\n\n", encoding="utf-8")
        with pytest.raises(PatternConfigError):
            load_pattern_file(path)

    def test_invalid_pattern_in_file(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("^(ok)$\n(\n", encoding="utf-8")
        with pytest.raises(PatternConfigError):
            load_pattern_file(path)
