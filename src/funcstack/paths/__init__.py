"""Resource path patterns: compiled once, matched against concrete paths.

Used by event triggers to describe which resources they watch and to pull
named values (``{uid}``, ``{path=**}``) out of the resources that fire them.
"""

from funcstack.paths.pattern import PathPattern, parse_segment, split_path
from funcstack.paths.segments import Literal, MultiCapture, Segment, SingleCapture

__all__ = [
    "Literal",
    "MultiCapture",
    "PathPattern",
    "Segment",
    "SingleCapture",
    "parse_segment",
    "split_path",
]
