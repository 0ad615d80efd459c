"""Regex engine adapter for glob patterns.

Shell-style globs compiled to whole-path regexes via re.

Syntax:
    *       any run of characters except "/"
    ?       one character except "/"
    [abc]   class, copied through; only "[!" is rewritten to "[^"
    \\x     literal x, for ordinary x and for \\ ^ $ + . *

At the start of a path segment, * and ? never match a leading ".".

Caveats (translation is a character rewrite, not a glob parser):
    \\? and \\[ lose the backslash and reach re as syntax, so r"a\\?"
    matches "" and "a" but not "a?".
    Class bodies are rewritten too: "[?]" becomes "[[^/]]" and does not
    match "?".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from globre.domain.exceptions import PatternCompileError
from globre.domain.translator import translate_glob_to_regex


@dataclass(frozen=True, slots=True)
class CompiledGlob:
    """Compiled glob pattern.

    Immutable value object containing original glob and compiled regex.

    Attributes:
        original: Original glob string
        regex: Compiled regex for matching
    """

    original: str
    regex: re.Pattern[str]

    def match(self, path: str) -> bool:
        """Check if the whole path matches the glob.

        Args:
            path: Path to match ("/" separated)

        Returns:
            True if path matches pattern

        Raises:
            TypeError: If path is None
        """
        if path is None:
            raise TypeError("path must not be None")
        return self.regex.fullmatch(path) is not None

    def __str__(self) -> str:
        """Return original glob string."""
        return self.original

    def __repr__(self) -> str:
        """Return repr with original glob."""
        return f"CompiledGlob({self.original!r})"


def compile_glob(pattern: str, *, ignore_case: bool = False) -> CompiledGlob:
    """Compile glob pattern to regex.

    FAIL-FIRST: raises PatternCompileError when the translated regex
    does not compile (e.g. unterminated "[").

    Globs whose class bodies contain "[" ("[[]", "[?]", "[*]") compile,
    but re emits FutureWarning("Possible nested set") for them; it
    propagates to the caller unchanged.

    Args:
        pattern: Glob pattern string
        ignore_case: Match case-insensitively

    Returns:
        CompiledGlob with original and compiled regex

    Raises:
        TypeError: If pattern is not str
        PatternCompileError: If translated regex is invalid
    """
    translated = translate_glob_to_regex(pattern)
    flags = re.IGNORECASE if ignore_case else 0

    try:
        regex = re.compile(translated, flags)
    except re.error as e:
        raise PatternCompileError(pattern, translated, str(e)) from e

    return CompiledGlob(original=pattern, regex=regex)


def matches_any(path: str, patterns: tuple[CompiledGlob, ...]) -> bool:
    """Check if path matches any of the patterns.

    Args:
        path: Path to match
        patterns: Compiled globs to check

    Returns:
        True if path matches at least one pattern (empty patterns = False)
    """
    return any(p.match(path) for p in patterns)


def matches_all(path: str, patterns: tuple[CompiledGlob, ...]) -> bool:
    """Check if path matches all of the patterns.

    Args:
        path: Path to match
        patterns: Compiled globs to check

    Returns:
        True if path matches all patterns (empty patterns = True)
    """
    return all(p.match(path) for p in patterns)
