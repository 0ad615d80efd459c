"""Path segment state for glob translation."""

from __future__ import annotations

from enum import Enum, auto


class SegmentState(Enum):
    """Position of the translator relative to path separators.

    AT_BOUNDARY:
        Start of pattern, or immediately after a "/".
        Wildcards here must not match a leading ".".
        Example: the "*" in "src/*" never matches "src/.git"

    MID_SEGMENT:
        Anywhere else inside a path segment.
        Wildcards match any character except "/".
        Example: the "*" in "src/a*" matches "src/a.b"
    """

    AT_BOUNDARY = auto()
    MID_SEGMENT = auto()

    @classmethod
    def initial(cls) -> SegmentState:
        """State before any character is consumed."""
        return cls.AT_BOUNDARY

    @classmethod
    def after(cls, char: str) -> SegmentState:
        """Transition: state after consuming raw input character.

        Args:
            char: Raw glob character just consumed (before substitution)

        Returns:
            AT_BOUNDARY iff char is "/", MID_SEGMENT otherwise
        """
        return cls.AT_BOUNDARY if char == "/" else cls.MID_SEGMENT
