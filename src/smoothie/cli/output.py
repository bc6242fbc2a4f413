"""
Output formatting utilities for the CLI.

All user-facing output goes through the shared console so that log records
(routed through rich) and messages interleave correctly.
"""

from rich.console import Console
from rich.panel import Panel

# Global console instance
console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_note(message: str) -> None:
    """Print a multi-line note, such as per-skill results, in a panel."""
    console.print(Panel(message, border_style="dim", expand=False))
