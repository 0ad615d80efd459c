"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from globre.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from globre.domain.model.match_report import MatchReport


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs match results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: MatchReport) -> None:
        """Report match results as JSON.

        Args:
            result: Match report
        """
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: MatchReport) -> dict[str, object]:
        """Convert MatchReport to JSON-serializable dict."""
        return {
            "glob": result.glob,
            "regex": result.regex,
            "summary": {
                "total": len(result.matches),
                "matched": result.matched_count,
            },
            "matches": [{"path": m.path, "matched": m.matched} for m in result.matches],
        }
