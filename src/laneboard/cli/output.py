"""Rich console output helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..ordering import CANONICAL_COLUMNS, Card, Column

# Shared console instance
console = Console()
error_console = Console(stderr=True)

COLUMN_TITLES: dict[Column, str] = {
    Column.TODO: "To do",
    Column.IN_PROGRESS: "In progress",
    Column.DONE: "Done",
}


def print_error(message: str) -> None:
    """Print an error message."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def board_table(name: str, cards: list[Card]) -> Table:
    """One table column per board column, cards listed top to bottom by order."""
    table = Table(title=name, show_header=True, header_style="bold")
    columns: dict[Column, list[Card]] = {}
    for column in CANONICAL_COLUMNS:
        table.add_column(f"{COLUMN_TITLES[column]} ({column.value})")
        columns[column] = sorted((c for c in cards if c.column == column), key=lambda c: c.order)

    rows = max((len(group) for group in columns.values()), default=0)
    for i in range(rows):
        cells = []
        for column in CANONICAL_COLUMNS:
            group = columns[column]
            if i < len(group):
                cells.append(f"{escape(group[i].title)} [dim]{group[i].id}[/dim]")
            else:
                cells.append("")
        table.add_row(*cells)
    return table
