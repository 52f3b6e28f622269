"""Tests for funcstack.paths — compiled path patterns."""

import pytest

from funcstack.paths import (
    Literal,
    MultiCapture,
    PathPattern,
    SingleCapture,
    parse_segment,
    split_path,
)


class TestSplitPath:
    def test_strips_outer_slashes(self) -> None:
        assert split_path("/users/42/") == ["users", "42"]

    def test_empty(self) -> None:
        assert split_path("") == []
        assert split_path("/") == []


class TestParseSegment:
    def test_literal(self) -> None:
        assert parse_segment("users") == Literal("users")

    def test_single_capture(self) -> None:
        assert parse_segment("{id}") == SingleCapture("id")

    def test_explicit_single_capture(self) -> None:
        assert parse_segment("{id=*}") == SingleCapture("id")

    def test_multi_capture(self) -> None:
        assert parse_segment("{path=**}") == MultiCapture("path")

    def test_interleaved_braces_stay_literal(self) -> None:
        assert parse_segment("{a}-something-{b}") == Literal("{a}-something-{b}")

    def test_unknown_capture_syntax_is_literal(self) -> None:
        assert parse_segment("{id=foo}") == Literal("{id=foo}")
        assert parse_segment("{}") == Literal("{}")


class TestPathPatternCompile:
    def test_segments(self) -> None:
        pattern = PathPattern("users/{uid}/files/{path=**}")
        assert pattern.segments == (
            Literal("users"),
            SingleCapture("uid"),
            Literal("files"),
            MultiCapture("path"),
        )

    def test_compile_alias(self) -> None:
        assert PathPattern.compile("a/{b}") == PathPattern("a/{b}")

    def test_value_is_raw_template(self) -> None:
        assert PathPattern("/users/{uid}").value == "/users/{uid}"

    def test_capture_names(self) -> None:
        assert PathPattern("a/{b}/{c=**}").capture_names == ("b", "c")

    def test_second_multi_capture_is_literal(self) -> None:
        pattern = PathPattern("{a=**}/x/{b=**}")
        assert pattern.segments[2] == Literal("{b=**}")

    def test_immutable(self) -> None:
        pattern = PathPattern("a/{b}")
        with pytest.raises(AttributeError):
            pattern._raw = "other"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({PathPattern("a/{b}"), PathPattern("a/{b}")}) == 1


class TestWildcards:
    def test_plain_path_has_no_wildcards(self) -> None:
        pattern = PathPattern("users/alice")
        assert pattern.has_wildcards() is False
        assert pattern.has_captures() is False

    def test_capture_is_wildcard(self) -> None:
        assert PathPattern("users/{uid}").has_wildcards() is True

    def test_bare_star_is_wildcard_without_capture(self) -> None:
        pattern = PathPattern("users/*")
        assert pattern.has_wildcards() is True
        assert pattern.has_captures() is False


class TestExtractMatches:
    def test_single_capture(self) -> None:
        assert PathPattern("{a}").extract_matches("match_a") == {"a": "match_a"}

    def test_binds_only_captures(self) -> None:
        pattern = PathPattern("users/{uid}/posts/{post}")
        assert pattern.extract_matches("users/42/posts/hello") == {"uid": "42", "post": "hello"}

    def test_explicit_single_capture(self) -> None:
        pattern = PathPattern("users/{uid=*}")
        assert pattern.extract_matches("users/42") == {"uid": "42"}

    def test_opaque_literal_never_binds(self) -> None:
        pattern = PathPattern("{a}-something-{b}-else-{c}")
        assert pattern.extract_matches("match_a-something-match_b-else-match_c") == {}

    def test_literals_are_not_validated(self) -> None:
        pattern = PathPattern("users/{uid}")
        assert pattern.extract_matches("accounts/7") == {"uid": "7"}

    def test_multi_capture_between_captures(self) -> None:
        pattern = PathPattern("something/{path=**}/else/{a}/hello/{b}/world")
        matches = pattern.extract_matches("something/is/a/thing/else/nothing/hello/user/world")
        assert matches == {"path": "is/a/thing", "a": "nothing", "b": "user"}

    def test_multi_capture_at_start(self) -> None:
        pattern = PathPattern("{path=**}/{file}")
        assert pattern.extract_matches("a/b/c.txt") == {"path": "a/b", "file": "c.txt"}

    def test_multi_capture_at_end(self) -> None:
        pattern = PathPattern("docs/{path=**}")
        assert pattern.extract_matches("docs/a/b/c") == {"path": "a/b/c"}

    def test_multi_capture_single_segment(self) -> None:
        pattern = PathPattern("docs/{path=**}/meta")
        assert pattern.extract_matches("docs/x/meta") == {"path": "x"}

    def test_bare_double_star_splits_without_binding(self) -> None:
        pattern = PathPattern("{first}/**/{last}")
        assert pattern.extract_matches("a/b/c/d") == {"first": "a", "last": "d"}

    def test_short_path_binds_fewer(self) -> None:
        pattern = PathPattern("users/{uid}/posts/{post}")
        assert pattern.extract_matches("users/42") == {"uid": "42"}

    def test_short_path_with_multi_capture(self) -> None:
        pattern = PathPattern("a/{path=**}/b/{c}")
        assert pattern.extract_matches("a") == {}

    def test_no_captures(self) -> None:
        assert PathPattern("users/alice").extract_matches("users/alice") == {}

    def test_pure(self) -> None:
        pattern = PathPattern("users/{uid}")
        first = pattern.extract_matches("users/1")
        second = pattern.extract_matches("users/1")
        assert first == second
        assert first is not second
