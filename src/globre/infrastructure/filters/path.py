"""Path filters.

Filter paths by glob patterns.
Unlike fnmatch, * and ? never cross "/" and never match a leading "."
at the start of a segment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from globre.infrastructure.adapters.compiled_glob import compile_glob, matches_any

if TYPE_CHECKING:
    from globre.infrastructure.filters.types import PathFilter


def include_paths(*patterns: str, ignore_case: bool = False) -> PathFilter:
    """Create filter that includes paths matching any pattern.

    Patterns are compiled once, here. For directory trees, list each
    depth explicitly (e.g. "src/*.py", "src/*/*.py").

    Args:
        *patterns: Glob patterns (e.g., "*.py", "src/*").
        ignore_case: Match case-insensitively.

    Returns:
        Filter that returns True for paths matching any pattern.
        No patterns = always False.

    Raises:
        PatternCompileError: If any pattern translates to an invalid regex.
    """
    compiled = tuple(compile_glob(p, ignore_case=ignore_case) for p in patterns)

    def _filter(path: str) -> bool:
        return matches_any(path, compiled)

    return _filter


def exclude_paths(*patterns: str, ignore_case: bool = False) -> PathFilter:
    """Create filter that excludes paths matching any pattern.

    Args:
        *patterns: Glob patterns to exclude (e.g., ".venv/*", "*.pyc").
        ignore_case: Match case-insensitively.

    Returns:
        Filter that returns False for paths matching any pattern.
        No patterns = always True.

    Raises:
        PatternCompileError: If any pattern translates to an invalid regex.
    """
    compiled = tuple(compile_glob(p, ignore_case=ignore_case) for p in patterns)

    def _filter(path: str) -> bool:
        return not matches_any(path, compiled)

    return _filter
