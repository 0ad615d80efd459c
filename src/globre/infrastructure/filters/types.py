"""Filter type aliases.

Python 3.12 PEP 695 type alias syntax.
PathFilter: takes "/"-separated path, returns True to include.
FilterSpec: anything the combinators accept in place of a PathFilter
(a glob string, a CompiledGlob, or a PathFilter).
"""

from collections.abc import Callable

from globre.infrastructure.adapters.compiled_glob import CompiledGlob

type PathFilter = Callable[[str], bool]

type FilterSpec = str | CompiledGlob | PathFilter
