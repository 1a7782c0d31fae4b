"""Rich rendering of engine progress messages."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class RichReporter:
    """Prints engine progress in the same clack style as the prompts."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def step(self, message: str) -> None:
        self._console.print(f"[dim]│[/]  [cyan]{escape(message)}[/]")

    def success(self, message: str) -> None:
        self._console.print(f"[dim]│[/]  [green]✓[/] {escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[dim]│[/]  [dim]{escape(message)}[/]")

    def warning(self, message: str) -> None:
        self._console.print(f"[dim]│[/]  [yellow]{escape(message)}[/]")
