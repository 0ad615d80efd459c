r"""Glob to regex translation.

Single left-to-right pass over the glob. Each cursor position is
classified, rewritten, and the segment state threaded into the next step.
The caller's string is never modified; output goes to a private buffer.

Rules (checked in order, one fires per position):
    \x  x in \ ^ $ + . *   kept as-is (already a valid regex escape)
    \x  any other x        backslash dropped, x copied literally
    ?                      one character except "/"
    *                      run of characters except "/"
    [!                     negated class, rewritten to [^
    ^ $ + .                escaped with a backslash
    anything else          copied verbatim

At a path boundary (start of pattern, or after "/") wildcards refuse
a leading ".", mirroring shell hidden-file rules:
    "*"     -> (?!\.)[^/]*
    "a*"    -> a[^/]*
    "src/?" -> src/[^/.]

Fallbacks (translation is total over str):
    trailing lone "\"  -> \\  (literal backslash)
    unterminated "["   -> copied through; compiling it is the caller's concern
"""

from __future__ import annotations

from globre.domain.model.segment_state import SegmentState
from globre.domain.model.step import Step

# Escaped glob characters whose escape is kept verbatim
KEPT_ESCAPES = frozenset("\\^$+.*")

# Literal glob characters that are regex metacharacters
ESCAPED_LITERALS = frozenset("^$+.")


def wildcard_class(state: SegmentState) -> str:
    """Regex for a single glob "?" in given state.

    Args:
        state: Segment state at the wildcard

    Returns:
        Class excluding "/" (and "." at a boundary)
    """
    if state is SegmentState.AT_BOUNDARY:
        return r"[^/.]"
    return r"[^/]"


def star_expansion(state: SegmentState) -> str:
    """Regex for a glob "*" in given state.

    At a boundary only the first character is barred from being ".",
    so "*" still matches "foo.txt" but never ".", ".." or ".git".

    Args:
        state: Segment state at the wildcard

    Returns:
        Zero-or-more run excluding "/" (and a leading "." at a boundary)
    """
    if state is SegmentState.AT_BOUNDARY:
        return r"(?!\.)[^/]*"
    return r"[^/]*"


def translate_step(pattern: str, index: int, state: SegmentState) -> Step:
    """Translate the glob character at index.

    Lookahead is explicit: a missing next character is a defined case,
    never an out-of-range access.

    Args:
        pattern: Full glob pattern (read only)
        index: Cursor position, 0 <= index < len(pattern)
        state: Segment state before this character

    Returns:
        Step with emitted regex, raw characters consumed, next state

    Raises:
        IndexError: If index is outside pattern
    """
    if not 0 <= index < len(pattern):
        raise IndexError(f"index {index} out of range for pattern of length {len(pattern)}")

    char = pattern[index]
    following = pattern[index + 1] if index + 1 < len(pattern) else None

    match char:
        case "\\" if following is None:
            return Step(emitted="\\\\", consumed=1, state=SegmentState.MID_SEGMENT)
        case "\\" if following in KEPT_ESCAPES:
            return Step(emitted=char + following, consumed=2, state=SegmentState.after(following))
        case "\\":
            return Step(emitted=following, consumed=2, state=SegmentState.after(following))
        case "?":
            return Step(emitted=wildcard_class(state), consumed=1, state=SegmentState.MID_SEGMENT)
        case "*":
            return Step(emitted=star_expansion(state), consumed=1, state=SegmentState.MID_SEGMENT)
        case "[" if following == "!":
            return Step(emitted="[^", consumed=2, state=SegmentState.MID_SEGMENT)
        case _ if char in ESCAPED_LITERALS:
            return Step(emitted="\\" + char, consumed=1, state=SegmentState.MID_SEGMENT)
        case _:
            return Step(emitted=char, consumed=1, state=SegmentState.after(char))


def translate_glob_to_regex(pattern: str) -> str:
    """Translate shell-style glob into regex pattern string.

    Output is unanchored; wrap it (or use fullmatch) to match whole paths.
    Never fails on str input, but the result is only a valid regex when
    the glob is well-formed.

    Args:
        pattern: Glob pattern (may be empty)

    Returns:
        Regex pattern string ("" for "")

    Raises:
        TypeError: If pattern is not str
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be str, got {type(pattern).__name__}")

    parts: list[str] = []
    state = SegmentState.initial()
    index = 0

    while index < len(pattern):
        step = translate_step(pattern, index, state)
        parts.append(step.emitted)
        index += step.consumed
        state = step.state

    return "".join(parts)
