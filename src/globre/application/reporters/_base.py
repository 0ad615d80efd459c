"""Base class for stream reporters.

PlainTextReporter and JSONReporter write a MatchReport to a TextIO.
ConsoleReporter returns a string instead and does not inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globre.domain.model.match_report import MatchReport


class BaseReporter(ABC):
    """Writes one MatchReport per report() call to its output stream.

    Subclasses own the stream (stdout unless given one) and the format;
    the glob, its regex and every tested path must appear in the output.
    """

    @abstractmethod
    def report(self, result: MatchReport) -> None:
        """Write result to the reporter's stream."""
