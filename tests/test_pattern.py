"""Tests for arfrigate.pattern."""

import pytest

from arfrigate.pattern import WILDCARD, Literal, Wildcard, compile_segment


class TestCompileSegment:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", ()),
            ("*", (WILDCARD,)),
            ("abc", (Literal("abc"),)),
            ("a*c", (Literal("a"), WILDCARD, Literal("c"))),
            ("a*", (Literal("a"), WILDCARD)),
            ("*a", (WILDCARD, Literal("a"))),
            (
                "*abc*df*",
                (WILDCARD, Literal("abc"), WILDCARD, Literal("df"), WILDCARD),
            ),
        ],
    )
    def test_tokens(self, raw: str, expected: tuple) -> None:
        assert compile_segment(raw).tokens == expected

    @pytest.mark.parametrize(
        ("raw", "length"),
        [("", 0), ("*", 1), ("abc", 1), ("a*c", 3), ("*abc*df*", 5)],
    )
    def test_token_count(self, raw: str, length: int) -> None:
        assert len(compile_segment(raw)) == length

    @pytest.mark.parametrize("raw", ["**", "a**b", "***x***", "a*****"])
    def test_adjacent_stars_collapse(self, raw: str) -> None:
        tokens = compile_segment(raw).tokens
        for left, right in zip(tokens, tokens[1:]):
            assert not (isinstance(left, Wildcard) and isinstance(right, Wildcard))

    def test_keeps_raw_text(self) -> None:
        assert compile_segment("*.py").raw == "*.py"


class TestSegmentMatches:
    def test_empty_pattern_matches_only_empty(self) -> None:
        pattern = compile_segment("")
        assert pattern.matches("") is True
        assert pattern.matches("*") is False
        assert pattern.matches("a") is False

    @pytest.mark.parametrize("target", ["", "*", "abcdf"])
    def test_lone_star_matches_anything(self, target: str) -> None:
        assert compile_segment("*").matches(target) is True

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("2342abcaasdfffss", True),
            ("abcdf", True),
            ("ddaaeeabcdf3d2", True),
            ("abc33e3ddf", True),
            ("abcd", False),
        ],
    )
    def test_multiple_wildcards(self, target: str, expected: bool) -> None:
        assert compile_segment("*abc*df*").matches(target) is expected

    @pytest.mark.parametrize(
        ("raw", "target", "expected"),
        [
            ("abc", "abc", True),
            ("abc", "abcd", False),
            ("abc", "ab", False),
            ("abcdefg", "abcdefg", True),
            ("abcdefg", "abcd", False),
            ("a*c", "abc", True),
            ("a*c", "ac", True),
            ("a*c", "ab", False),
            ("*.txt", "a.txt", True),
            ("*.txt", "a.md", False),
            ("*.txt", ".txt", True),
            ("test_*", "test_foo.py", True),
            ("test_*", "foo_test.py", False),
        ],
    )
    def test_literal_and_wildcard_mix(self, raw: str, target: str, expected: bool) -> None:
        assert compile_segment(raw).matches(target) is expected

    def test_first_occurrence_without_backtracking(self) -> None:
        # The literal after a wildcard anchors at its first occurrence.
        assert compile_segment("a*c").matches("abcbc") is False

    @pytest.mark.parametrize("target", ["", "a", "ab"])
    def test_literal_longer_than_target_is_no_match(self, target: str) -> None:
        assert compile_segment("abc").matches(target) is False
        assert compile_segment("x*abc").matches(target) is False
