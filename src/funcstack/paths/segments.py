"""Path segment frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Literal:
    """A segment matched by position only.

    Plain:   ``users``
    Opaque:  ``{a}-something-{b}`` (brace syntax mixed with text is never
             decomposed into captures)
    Wildcard: ``*`` / ``**`` (match without binding)
    """

    text: str

    @property
    def is_wildcard(self) -> bool:
        return "*" in self.text

    @property
    def is_multi_wildcard(self) -> bool:
        return self.text == "**"


@dataclass(frozen=True, slots=True)
class SingleCapture:
    """A ``{name}`` or ``{name=*}`` segment. Binds exactly one path segment."""

    name: str


@dataclass(frozen=True, slots=True)
class MultiCapture:
    """A ``{name=**}`` segment. Binds one or more path segments joined by ``/``."""

    name: str


type Segment = Literal | SingleCapture | MultiCapture


def is_multi_segment(segment: Segment) -> bool:
    """Return True for segments that may span several path segments."""
    match segment:
        case MultiCapture():
            return True
        case Literal():
            return segment.is_multi_wildcard
        case _:
            return False
