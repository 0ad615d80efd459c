"""Composite filters: AND, OR, NOT over globs and filters.

Operands may be glob strings, CompiledGlobs or PathFilters, freely mixed:

    all_of("src/*.py", negate("src/test_*"))

Glob strings are compiled once, when the composite is built, so an
invalid glob fails there and not on the first path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from globre.infrastructure.adapters.compiled_glob import CompiledGlob, compile_glob

if TYPE_CHECKING:
    from globre.infrastructure.filters.types import FilterSpec, PathFilter


def as_filter(spec: FilterSpec, *, ignore_case: bool = False) -> PathFilter:
    """Turn a glob, CompiledGlob or PathFilter into a PathFilter.

    Args:
        spec: Operand to convert.
        ignore_case: Applies to glob strings only; CompiledGlobs keep
            the flags they were compiled with.

    Returns:
        Whole-path matcher for globs, the filter itself otherwise.

    Raises:
        PatternCompileError: If a glob string translates to an invalid regex.
        TypeError: If spec is none of the accepted kinds.
    """
    match spec:
        case str():
            return compile_glob(spec, ignore_case=ignore_case).match
        case CompiledGlob():
            return spec.match
        case _ if callable(spec):
            return spec
        case _:
            raise TypeError(f"expected glob, CompiledGlob or filter, got {type(spec).__name__}")


def all_of(*specs: FilterSpec, ignore_case: bool = False) -> PathFilter:
    """Create filter that requires ALL operands to pass (AND).

    Args:
        *specs: Globs, CompiledGlobs or filters.
        ignore_case: Match glob strings case-insensitively.

    Returns:
        Filter that returns True only if the path passes every operand.
        No operands = always True.
    """
    filters = tuple(as_filter(s, ignore_case=ignore_case) for s in specs)

    def _filter(path: str) -> bool:
        return all(f(path) for f in filters)

    return _filter


def any_of(*specs: FilterSpec, ignore_case: bool = False) -> PathFilter:
    """Create filter that requires ANY operand to pass (OR).

    Args:
        *specs: Globs, CompiledGlobs or filters.
        ignore_case: Match glob strings case-insensitively.

    Returns:
        Filter that returns True if the path passes at least one operand.
        No operands = always False.
    """
    filters = tuple(as_filter(s, ignore_case=ignore_case) for s in specs)

    def _filter(path: str) -> bool:
        return any(f(path) for f in filters)

    return _filter


def negate(spec: FilterSpec, *, ignore_case: bool = False) -> PathFilter:
    """Create filter passing exactly the paths the operand rejects (NOT)."""
    flt = as_filter(spec, ignore_case=ignore_case)

    def _filter(path: str) -> bool:
        return not flt(path)

    return _filter
