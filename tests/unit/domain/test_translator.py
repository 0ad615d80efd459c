"""Tests for domain/translator.py.

Tests:
- translate_step: one row of the classification table per test
- translate_glob_to_regex: full translation output
- Fallbacks for malformed globs (trailing backslash, unterminated class)
- Behavior of translated regexes against sample paths
"""

import re

import pytest

from globre.domain.model.segment_state import SegmentState
from globre.domain.model.step import Step
from globre.domain.translator import (
    star_expansion,
    translate_glob_to_regex,
    translate_step,
    wildcard_class,
)

AT_BOUNDARY = SegmentState.AT_BOUNDARY
MID_SEGMENT = SegmentState.MID_SEGMENT


class TestWildcardClass:
    """Tests for ? expansion by state."""

    def test_boundary_excludes_slash_and_dot(self) -> None:
        """At boundary ? excludes / and leading dot."""
        assert wildcard_class(AT_BOUNDARY) == r"[^/.]"

    def test_mid_segment_excludes_slash_only(self) -> None:
        """Mid-segment ? excludes only /."""
        assert wildcard_class(MID_SEGMENT) == r"[^/]"


class TestStarExpansion:
    """Tests for * expansion by state."""

    def test_boundary_refuses_leading_dot(self) -> None:
        """At boundary * is guarded by a negative lookahead for dot."""
        assert star_expansion(AT_BOUNDARY) == r"(?!\.)[^/]*"

    def test_mid_segment_is_plain_run(self) -> None:
        """Mid-segment * is a run of non-slash characters."""
        assert star_expansion(MID_SEGMENT) == r"[^/]*"


class TestTranslateStep:
    """Tests for single-step classification."""

    @pytest.mark.parametrize("escaped", ["\\", "^", "$", "+", ".", "*"])
    def test_kept_escape(self, escaped: str) -> None:
        """Backslash before regex metacharacter is kept verbatim."""
        step = translate_step("\\" + escaped, 0, AT_BOUNDARY)
        assert step == Step(emitted="\\" + escaped, consumed=2, state=MID_SEGMENT)

    @pytest.mark.parametrize("escaped", ["a", "?", "[", "-", "!"])
    def test_dropped_escape(self, escaped: str) -> None:
        """Backslash before other character is dropped."""
        step = translate_step("\\" + escaped, 0, AT_BOUNDARY)
        assert step == Step(emitted=escaped, consumed=2, state=MID_SEGMENT)

    def test_escaped_slash_enters_boundary(self) -> None:
        """Escaped / is still a separator."""
        step = translate_step("\\/", 0, MID_SEGMENT)
        assert step == Step(emitted="/", consumed=2, state=AT_BOUNDARY)

    def test_trailing_backslash(self) -> None:
        """Lone trailing backslash becomes escaped literal backslash."""
        step = translate_step("a\\", 1, MID_SEGMENT)
        assert step == Step(emitted="\\\\", consumed=1, state=MID_SEGMENT)

    def test_question_at_boundary(self) -> None:
        """? at boundary uses dot-excluding class."""
        step = translate_step("?", 0, AT_BOUNDARY)
        assert step == Step(emitted=r"[^/.]", consumed=1, state=MID_SEGMENT)

    def test_question_mid_segment(self) -> None:
        """? mid-segment uses slash-excluding class."""
        step = translate_step("a?", 1, MID_SEGMENT)
        assert step == Step(emitted=r"[^/]", consumed=1, state=MID_SEGMENT)

    def test_star_at_boundary(self) -> None:
        """* at boundary refuses leading dot."""
        step = translate_step("*", 0, AT_BOUNDARY)
        assert step == Step(emitted=r"(?!\.)[^/]*", consumed=1, state=MID_SEGMENT)

    def test_star_mid_segment(self) -> None:
        """* mid-segment is plain run."""
        step = translate_step("a*", 1, MID_SEGMENT)
        assert step == Step(emitted=r"[^/]*", consumed=1, state=MID_SEGMENT)

    def test_negated_class_opening(self) -> None:
        """[! becomes [^ and consumes both characters."""
        step = translate_step("[!a]", 0, AT_BOUNDARY)
        assert step == Step(emitted="[^", consumed=2, state=MID_SEGMENT)

    def test_plain_class_opening(self) -> None:
        """[ not followed by ! is copied."""
        step = translate_step("[a]", 0, AT_BOUNDARY)
        assert step == Step(emitted="[", consumed=1, state=MID_SEGMENT)

    @pytest.mark.parametrize("char", ["^", "$", "+", "."])
    def test_literal_metacharacter_escaped(self, char: str) -> None:
        """Regex metacharacters get a backslash."""
        step = translate_step(char, 0, AT_BOUNDARY)
        assert step == Step(emitted="\\" + char, consumed=1, state=MID_SEGMENT)

    def test_slash_enters_boundary(self) -> None:
        """/ is copied and moves to AT_BOUNDARY."""
        step = translate_step("/", 0, MID_SEGMENT)
        assert step == Step(emitted="/", consumed=1, state=AT_BOUNDARY)

    def test_plain_character_leaves_boundary(self) -> None:
        """Ordinary character is copied and moves to MID_SEGMENT."""
        step = translate_step("x", 0, AT_BOUNDARY)
        assert step == Step(emitted="x", consumed=1, state=MID_SEGMENT)

    def test_index_out_of_range_raises(self) -> None:
        """Cursor past end raises IndexError."""
        with pytest.raises(IndexError, match="out of range"):
            translate_step("a", 1, AT_BOUNDARY)

    def test_negative_index_raises(self) -> None:
        """Negative cursor raises IndexError."""
        with pytest.raises(IndexError):
            translate_step("a", -1, AT_BOUNDARY)


class TestTranslateGlobToRegex:
    """Tests for full translation output."""

    @pytest.mark.parametrize(
        ("glob", "expected"),
        [
            ("", ""),
            ("*", r"(?!\.)[^/]*"),
            ("a*", r"a[^/]*"),
            ("**", r"(?!\.)[^/]*[^/]*"),
            ("?", r"[^/.]"),
            ("a?b", r"a[^/]b"),
            ("src/*", r"src/(?!\.)[^/]*"),
            ("src/?", r"src/[^/.]"),
            ("*/*.py", r"(?!\.)[^/]*/(?!\.)[^/]*\.py"),
            ("[!abc]", "[^abc]"),
            ("[abc]", "[abc]"),
            ("a.b", r"a\.b"),
            ("^$+.", r"\^\$\+\."),
            (r"\*", r"\*"),
            (r"\.", r"\."),
            ("\\\\", "\\\\"),
            (r"\a", "a"),
            (r"\/*", r"/(?!\.)[^/]*"),
        ],
    )
    def test_translation(self, glob: str, expected: str) -> None:
        """Glob translates to expected regex text."""
        assert translate_glob_to_regex(glob) == expected

    @pytest.mark.parametrize("glob", ["abc", "src/main_1-2", "a b/c,d", "(x)|{y}"])
    def test_identity_without_metacharacters(self, glob: str) -> None:
        """Globs without * ? [ \\ ^ $ + . translate to themselves."""
        assert translate_glob_to_regex(glob) == glob

    def test_does_not_mutate_input(self) -> None:
        """Input string is left as given."""
        glob = "src/[!.]*.py"
        translate_glob_to_regex(glob)
        assert glob == "src/[!.]*.py"

    def test_non_str_raises(self) -> None:
        """Non-str input raises TypeError."""
        with pytest.raises(TypeError, match="pattern must be str"):
            translate_glob_to_regex(None)  # type: ignore[arg-type]


class TestTranslateFallbacks:
    """Tests for defined behavior on malformed globs."""

    def test_trailing_backslash_is_literal(self) -> None:
        """Trailing backslash matches a literal backslash."""
        regex = translate_glob_to_regex("abc\\")
        assert regex == "abc\\\\"
        assert re.fullmatch(regex, "abc\\")

    def test_lone_backslash(self) -> None:
        """Glob of a single backslash does not fail."""
        assert translate_glob_to_regex("\\") == "\\\\"

    def test_unterminated_class_copied(self) -> None:
        """Unterminated [ is copied through without failing."""
        assert translate_glob_to_regex("a[bc") == "a[bc"

    def test_negation_at_end(self) -> None:
        """[! at end still translates."""
        assert translate_glob_to_regex("[!") == "[^"


class TestTranslatedRegexBehavior:
    """Translated regexes behave like shell globs."""

    def test_star_rejects_dot_segments(self) -> None:
        """* never matches . or .. as a whole segment."""
        regex = re.compile(translate_glob_to_regex("*"))
        assert regex.fullmatch("foo")
        assert regex.fullmatch("foo.txt")
        assert not regex.fullmatch(".")
        assert not regex.fullmatch("..")
        assert not regex.fullmatch("a/b")

    def test_question_single_character(self) -> None:
        """? matches exactly one non-slash character."""
        regex = re.compile(translate_glob_to_regex("a?b"))
        assert regex.fullmatch("aXb")
        assert not regex.fullmatch("a/b")
        assert not regex.fullmatch("ab")

    def test_dot_is_literal(self) -> None:
        """Literal dot is escaped."""
        regex = re.compile(translate_glob_to_regex("a.b"))
        assert regex.fullmatch("a.b")
        assert not regex.fullmatch("axb")

    def test_escaped_star_is_literal(self) -> None:
        """\\* matches only a literal star."""
        regex = re.compile(translate_glob_to_regex(r"\*"))
        assert regex.fullmatch("*")
        assert not regex.fullmatch("x")

    def test_negated_class(self) -> None:
        """[!abc] matches one character not listed."""
        regex = re.compile(translate_glob_to_regex("[!abc]"))
        assert regex.fullmatch("d")
        assert not regex.fullmatch("a")
