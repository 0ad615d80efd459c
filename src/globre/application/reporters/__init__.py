"""Reporters for glob match results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from globre.application.reporters._base import BaseReporter
from globre.application.reporters.console import ConsoleConfig, ConsoleReporter
from globre.application.reporters.json_reporter import JSONReporter
from globre.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
