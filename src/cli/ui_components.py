"""UI components for the CLI (Rich).

Keeps tables and panels out of the command functions so several commands can
share them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.operations import Operation


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("Issuetrak API Console", style="bold cyan")
    subtitle = Text("Pick an operation, inspect the response", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_operations_table(operations: Sequence[Operation]) -> Table:
    table = Table(title="Issuetrak Operations")
    table.add_column("#", style="cyan", justify="right", no_wrap=True)
    table.add_column("Operation", style="white")
    for index, operation in enumerate(operations, start=1):
        table.add_row(str(index), operation.label)
    return table


def build_settings_table(rows: Iterable[tuple[str, str]], *, title: str = "Settings") -> Table:
    """Two-column table of configuration keys and their effective values."""

    table = Table(title=title)
    table.add_column("Key", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in rows:
        table.add_row(key, value)
    return table
