"""Console output for the filekit CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from filekit.types import FileInfo


class TUI:
    """Text output helpers (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI.

        Args:
            console: Console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def show_info(self, info: FileInfo) -> None:
        """Display file metadata as a table.

        Args:
            info: Snapshot to display.
        """
        table = Table(title=info.path, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Size", f"{info.size} bytes")
        table.add_row("Mode", info.mode_octal)
        table.add_row("Modified", str(info.mtime))
        table.add_row("Owner", f"{info.owner or '?'} ({info.uid})")
        table.add_row("Group", f"{info.group or '?'} ({info.gid})")

        self.console.print(table)

    def show_content(self, content: str) -> None:
        """Print file content verbatim, without markup processing."""
        self.console.print(content, markup=False, highlight=False, end="")

    def show_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Display error message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Display warning message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[yellow]![/yellow] {message}")
