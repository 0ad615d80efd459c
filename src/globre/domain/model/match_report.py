"""Match report value objects."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Outcome of matching one path against a glob.

    Attributes:
        path: Path that was tested
        matched: True if the whole path matched
    """

    path: str
    matched: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")


@dataclass(frozen=True, slots=True)
class MatchReport:
    """Glob, its regex, and per-path outcomes in input order.

    Attributes:
        glob: Original glob pattern
        regex: Regex the glob translated to
        matches: Outcome for every tested path
    """

    glob: str
    regex: str
    matches: tuple[PathMatch, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.glob is None:
            raise TypeError("glob must not be None")
        if not isinstance(self.matches, tuple):
            raise TypeError(f"matches must be tuple, got {type(self.matches).__name__}")

    @property
    def matched_paths(self) -> tuple[str, ...]:
        """Paths that matched, in input order."""
        return tuple(m.path for m in self.matches if m.matched)

    @property
    def unmatched_paths(self) -> tuple[str, ...]:
        """Paths that did not match, in input order."""
        return tuple(m.path for m in self.matches if not m.matched)

    @property
    def matched_count(self) -> int:
        """Number of matched paths."""
        return sum(1 for m in self.matches if m.matched)
