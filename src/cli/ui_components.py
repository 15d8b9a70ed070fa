"""Rich UI components for the CLI.

Kept apart from the commands so tables/panels can be reused and tested.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import AdapterError, InvalidError


def build_paths_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(title="Resource Paths")
    table.add_column("Model", style="cyan", no_wrap=True)
    table.add_column("Path", style="magenta")
    for model_name, path in rows:
        table.add_row(model_name, path)
    return table


def build_errors_table(error: InvalidError) -> Table:
    """One row per (field, message) pair, in server order."""

    table = Table(title=f"Validation Errors ({len(error.errors)})")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Message", style="white")
    table.add_column("Pointer", style="dim")
    for item in error.errors:
        table.add_row(item.field, item.message, item.pointer)
    return table


def build_error_panel(error: AdapterError) -> Panel:
    title = Text(type(error).__name__, style="bold red")
    body = Text(str(error))
    if error.status is not None:
        body.append(f"\nStatus: {error.status}", style="dim")
    return Panel(body, title=title, border_style="red")
