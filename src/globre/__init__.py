"""globre - translate shell-style glob patterns into regular expressions."""

__version__ = "0.1.0"

from globre.domain.exceptions import GlobreError, PatternCompileError
from globre.domain.translator import translate_glob_to_regex
from globre.infrastructure.adapters import CompiledGlob, compile_glob, matches_all, matches_any

__all__ = [
    "CompiledGlob",
    "GlobreError",
    "PatternCompileError",
    "__version__",
    "compile_glob",
    "matches_all",
    "matches_any",
    "translate_glob_to_regex",
]
