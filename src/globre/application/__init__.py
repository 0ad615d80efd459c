"""Application layer.

- services: Match service (build_match_report)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from globre.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from globre.application.services import build_match_report

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    "build_match_report",
]
