"""Infrastructure adapters for external interfaces."""

from globre.infrastructure.adapters.compiled_glob import (
    CompiledGlob,
    compile_glob,
    matches_all,
    matches_any,
)

__all__ = [
    "CompiledGlob",
    "compile_glob",
    "matches_all",
    "matches_any",
]
