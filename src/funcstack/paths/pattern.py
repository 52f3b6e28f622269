"""Compiled resource path patterns with named and multi-segment captures.

Patterns follow the Eventarc path-pattern syntax::

    "users/{uid}"                  -> one single capture
    "users/{uid=*}/posts"          -> explicit single capture
    "files/{path=**}/meta/{field}" -> multi capture followed by a single capture

A pattern is compiled once, when a trigger is defined, and only read
afterwards. Matching never raises: a path that does not line up with the
pattern simply produces fewer bindings.
"""

from __future__ import annotations

import re

from funcstack.paths.segments import (
    Literal,
    MultiCapture,
    Segment,
    SingleCapture,
    is_multi_segment,
)

# A whole segment of the form {name}, {name=*} or {name=**}
_CAPTURE_RE = re.compile(r"^\{(?P<name>[^/{}=]+)(?:=(?P<wildcard>\*\*?))?\}$")


def split_path(path: str) -> list[str]:
    """Split a slash-delimited path, ignoring leading and trailing slashes.

    Examples::

        "/users/42/" -> ["users", "42"]
        ""           -> []
    """
    stripped = path.strip("/")
    if not stripped:
        return []
    return stripped.split("/")


def parse_segment(part: str) -> Segment:
    """Classify one template segment.

    Examples::

        "users"          -> Literal("users")
        "{id}"           -> SingleCapture("id")
        "{id=*}"         -> SingleCapture("id")
        "{path=**}"      -> MultiCapture("path")
        "{a}-x-{b}"      -> Literal("{a}-x-{b}")
    """
    match = _CAPTURE_RE.match(part)
    if match is None:
        return Literal(part)
    if match.group("wildcard") == "**":
        return MultiCapture(match.group("name"))
    return SingleCapture(match.group("name"))


class PathPattern:
    """An immutable, compiled path pattern.

    Usage::

        pattern = PathPattern("users/{uid}/docs/{path=**}")
        pattern.extract_matches("users/42/docs/a/b")
        # {"uid": "42", "path": "a/b"}
    """

    __slots__ = ("_multi_index", "_raw", "_segments")

    def __init__(self, raw: str) -> None:
        segments: list[Segment] = []
        multi_index: int | None = None
        for index, part in enumerate(split_path(raw)):
            segment = parse_segment(part)
            if is_multi_segment(segment):
                if multi_index is None:
                    multi_index = index
                elif isinstance(segment, MultiCapture):
                    # Only the first multi-segment element splits the path
                    segment = Literal(part)
            segments.append(segment)

        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_segments", tuple(segments))
        object.__setattr__(self, "_multi_index", multi_index)

    @classmethod
    def compile(cls, raw: str) -> PathPattern:
        return cls(raw)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "PathPattern is immutable"
        raise AttributeError(msg)

    @property
    def value(self) -> str:
        """The template this pattern was compiled from."""
        return self._raw

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def capture_names(self) -> tuple[str, ...]:
        return tuple(
            s.name for s in self._segments if isinstance(s, (SingleCapture, MultiCapture))
        )

    def has_captures(self) -> bool:
        return any(isinstance(s, (SingleCapture, MultiCapture)) for s in self._segments)

    def has_wildcards(self) -> bool:
        """True if matching needs a path pattern rather than an exact value."""
        return any(
            not isinstance(s, Literal) or s.is_wildcard for s in self._segments
        )

    def extract_matches(self, path: str) -> dict[str, str]:
        """Bind capture names to the corresponding parts of *path*.

        Without a multi-segment element, pattern and path segments pair up
        by position. With one at position *k*, the first *k* pattern
        segments take the first path segments, the segments after it take
        the last path segments, and everything in between is joined with
        ``/`` and bound to the multi capture.

        Literal segments are not checked against the path.
        """
        matches: dict[str, str] = {}
        if not self.has_captures():
            return matches

        parts = split_path(path)

        if self._multi_index is None:
            for segment, part in zip(self._segments, parts, strict=False):
                if isinstance(segment, SingleCapture):
                    matches[segment.name] = part
            return matches

        k = self._multi_index
        head = self._segments[:k]
        tail = self._segments[k + 1 :]
        tail_start = len(parts) - len(tail)

        for segment, part in zip(head, parts, strict=False):
            if isinstance(segment, SingleCapture):
                matches[segment.name] = part

        multi = self._segments[k]
        if isinstance(multi, MultiCapture) and tail_start > k:
            matches[multi.name] = "/".join(parts[k:tail_start])

        for offset, segment in enumerate(tail):
            index = tail_start + offset
            if index < k:
                # Path too short: this tail segment would overlap the head
                continue
            if isinstance(segment, SingleCapture):
                matches[segment.name] = parts[index]

        return matches

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathPattern):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"PathPattern({self._raw!r})"

    def __str__(self) -> str:
        return self._raw
