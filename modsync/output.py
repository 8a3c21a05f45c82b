"""Console output formatting for the modsync CLI."""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Writes user-facing messages as styled text or JSON."""

    def __init__(
        self,
        json_output: bool = False,
        quiet: bool = False,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        """Initialize output formatter.

        Args:
            json_output: Emit machine-readable JSON instead of styled text
            quiet: Suppress non-essential output
            console: Console for regular output
            err_console: Console for error output
        """
        self.json_output = json_output
        self.quiet = quiet
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def _enabled(self) -> bool:
        return not self.quiet and not self.json_output

    def info(self, message: str) -> None:
        """Print an informational message."""
        if self._enabled():
            self.console.print(message, style="cyan")

    def success(self, message: str) -> None:
        """Print a success message."""
        if self._enabled():
            self.console.print(f"✓ {message}", style="bold green")

    def warning(self, message: str) -> None:
        """Print a warning, unless output is quiet."""
        if not self.quiet:
            self.err_console.print(f"Warning: {message}", style="yellow")

    def error(self, message: str) -> None:
        """Print an error. Errors are shown even in quiet mode."""
        self.err_console.print(f"Error: {message}", style="bold red")

    def output_json(self, data: Any) -> None:
        """Write data as JSON to stdout."""
        sys.stdout.write(json.dumps(data, indent=2, default=str) + "\n")

    def print_summary(self, title: str, items: list[tuple[str, str]]) -> None:
        """Print a two-column summary table.

        Args:
            title: Table title
            items: List of (label, value) rows
        """
        if not self._enabled():
            return
        table = Table(title=title, show_header=False)
        table.add_column("Item", style="bold")
        table.add_column("Value")
        for label, value in items:
            table.add_row(label, value)
        self.console.print(table)
