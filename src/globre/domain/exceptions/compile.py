"""Pattern compilation exceptions."""

from globre.domain.exceptions.base import GlobreError


class PatternCompileError(GlobreError):
    """Translated glob is not a valid regex.

    Raised when the regex produced for a glob fails to compile
    (unterminated class, stray quantifier, unbalanced group).
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        pattern: Original glob pattern (must not be empty)
        regex: Regex the glob translated to
        reason: Compiler error message (must not be empty)
    """

    def __init__(self, pattern: str, regex: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not pattern:
            raise ValueError("pattern must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.pattern = pattern
        self.regex = regex
        self.reason = reason
        super().__init__(f"Invalid glob '{pattern}': {reason}")
