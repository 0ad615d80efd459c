"""Domain exceptions."""

from globre.domain.exceptions.base import GlobreError
from globre.domain.exceptions.compile import PatternCompileError

__all__ = [
    "GlobreError",
    "PatternCompileError",
]
