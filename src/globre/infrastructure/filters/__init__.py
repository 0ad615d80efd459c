"""Infrastructure layer: stateless path filter functions.

Filters are pure functions: PathFilter = Callable[[str], bool]
True = include path, False = exclude path.

Usage:
    from globre.infrastructure.filters import all_of, include_paths, negate

    # Single filter
    flt = include_paths("src/*.py")
    selected = [p for p in paths if flt(p)]

    # Composed filters: globs, CompiledGlobs and filters mix freely
    flt = all_of("src/*.py", negate("src/test_*"))
"""

from globre.infrastructure.filters.composite import all_of, any_of, as_filter, negate
from globre.infrastructure.filters.path import exclude_paths, include_paths
from globre.infrastructure.filters.types import FilterSpec, PathFilter

__all__ = [
    "FilterSpec",
    "PathFilter",
    "all_of",
    "any_of",
    "as_filter",
    "exclude_paths",
    "include_paths",
    "negate",
]
