"""Single translation step value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globre.domain.model.segment_state import SegmentState


@dataclass(frozen=True, slots=True)
class Step:
    """Result of translating the glob at one cursor position.

    Attributes:
        emitted: Regex text appended to output
        consumed: Raw glob characters consumed (1 or 2)
        state: Segment state after this step
    """

    emitted: str
    consumed: int
    state: SegmentState

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.consumed not in (1, 2):
            raise ValueError(f"consumed must be 1 or 2, got {self.consumed}")
