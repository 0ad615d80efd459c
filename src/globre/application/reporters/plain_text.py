"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from globre.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from globre.domain.model.match_report import MatchReport


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: MatchReport) -> None:
        """Report match results as plain text.

        Args:
            result: Match report
        """
        self._write("=" * 70)
        self._write(f"Glob:  {result.glob}")
        self._write(f"Regex: {result.regex}")
        self._write("=" * 70)

        for match in result.matches:
            marker = "+" if match.matched else "-"
            self._write(f"  {marker} {match.path}")

        self._write()
        self._write(f"Matched: {result.matched_count}/{len(result.matches)}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
