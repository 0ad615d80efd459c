"""Match service: glob + paths -> MatchReport."""

from __future__ import annotations

from typing import TYPE_CHECKING

from globre.domain.model.match_report import MatchReport, PathMatch
from globre.infrastructure.adapters.compiled_glob import compile_glob

if TYPE_CHECKING:
    from collections.abc import Iterable


def build_match_report(
    pattern: str,
    paths: Iterable[str],
    *,
    ignore_case: bool = False,
) -> MatchReport:
    """Match every path against a glob and collect outcomes.

    Args:
        pattern: Glob pattern
        paths: Paths to test, reported in iteration order
        ignore_case: Match case-insensitively

    Returns:
        MatchReport with glob, translated regex, per-path outcomes

    Raises:
        PatternCompileError: If pattern translates to an invalid regex
    """
    compiled = compile_glob(pattern, ignore_case=ignore_case)
    matches = tuple(PathMatch(path=path, matched=compiled.match(path)) for path in paths)
    return MatchReport(glob=pattern, regex=compiled.regex.pattern, matches=matches)
