"""Domain model entities."""

from globre.domain.model.match_report import MatchReport, PathMatch
from globre.domain.model.segment_state import SegmentState
from globre.domain.model.step import Step

__all__ = [
    "MatchReport",
    "PathMatch",
    "SegmentState",
    "Step",
]
