"""Sink that prints each failure to a rich console as it is reported."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from fluentcheck.diagnostics.models import Diagnostic
from fluentcheck.diagnostics.sink import CollectingSink


class ConsoleSink(CollectingSink):
    """Collects diagnostics and renders each one immediately."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)

    def report(self, diagnostic: Diagnostic) -> None:
        super().report(diagnostic)
        title = diagnostic.kind.value.replace("_", " ")
        self.console.print(
            Panel(
                Text(diagnostic.message or diagnostic.expr),
                title=f"[bold red]{title}[/bold red]",
                border_style="red",
                expand=False,
            )
        )
