"""globre domain layer.

Pure domain logic with no external dependencies.
Only imports: dataclasses, enum, typing
"""

from globre.domain.exceptions import GlobreError, PatternCompileError
from globre.domain.model import MatchReport, PathMatch, SegmentState, Step
from globre.domain.translator import (
    star_expansion,
    translate_glob_to_regex,
    translate_step,
    wildcard_class,
)

__all__ = [
    "GlobreError",
    "MatchReport",
    "PathMatch",
    "PatternCompileError",
    "SegmentState",
    "Step",
    "star_expansion",
    "translate_glob_to_regex",
    "translate_step",
    "wildcard_class",
]
