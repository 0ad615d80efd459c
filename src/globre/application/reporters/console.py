"""Console reporter: MatchReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from globre.domain.model.match_report import MatchReport, PathMatch


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_unmatched: Include rows for paths that did not match.
        max_paths: Max rows to display. None = unlimited.
        width: Console width in characters (must be > 0).
    """

    show_unmatched: bool = True
    max_paths: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_paths is not None and self.max_paths < 0:
            raise ValueError(f"max_paths must be >= 0, got {self.max_paths}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: MatchReport) -> str:
        """Format match report as rich formatted string.

        Args:
            result: Match report to format.

        Returns:
            Formatted string with colors and a table of paths.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)
        self._render_matches(console, self._select(result.matches))

        return output.getvalue()

    def _select(self, matches: tuple[PathMatch, ...]) -> tuple[PathMatch, ...]:
        """Apply show_unmatched and max_paths."""
        selected = [m for m in matches if m.matched or self._config.show_unmatched]
        if self._config.max_paths is not None:
            selected = selected[: self._config.max_paths]
        return tuple(selected)

    def _render_header(self, console: Console, result: MatchReport) -> None:
        """Render glob, regex and summary."""
        console.print()
        console.rule("[bold]GLOB MATCH[/bold]")
        console.print()
        console.print(f"[bold]Glob:[/bold]  {escape(result.glob)}")
        console.print(f"[bold]Regex:[/bold] {escape(result.regex)}")
        console.print(f"[bold]Matched:[/bold] {result.matched_count}/{len(result.matches)}")
        console.print()

    def _render_matches(self, console: Console, matches: tuple[PathMatch, ...]) -> None:
        """Render one table row per path."""
        if not matches:
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Path")
        table.add_column("Result")

        for match in matches:
            result = Text("match", style="green") if match.matched else Text("no match", style="red")
            table.add_row(Text(match.path), result)

        console.print(table)
