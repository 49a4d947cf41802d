"""
Rich table rendering for query results.
"""

from rich.console import Console
from rich.table import Table

console = Console()


def format_cell(value) -> str:
    if value is None:
        return "N/A"
    return str(value)


def display_table(rows: list, title: str, columns: list[tuple[str, str]]) -> None:
    """
    Prints rows as a Rich Table.
    `columns` is a list of (header, row attribute) pairs, in display order.
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for header, _ in columns:
        if header == "ID":
            table.add_column(header, style="dim", width=5)
        else:
            table.add_column(header)

    for row in rows:
        table.add_row(*(format_cell(getattr(row, attribute)) for _, attribute in columns))

    console.print(table)
