"""Helpers for reading Rich console output."""

from rich.console import Console


def output_of(console: Console) -> str:
    """Everything written to a buffer-backed console."""
    return console.file.getvalue()


def table_rows(output: str):
    """Cell values of every body row of a rendered Rich table."""
    rows = []
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("│"):
            rows.append([cell.strip() for cell in line.strip("│").split("│")])
    return rows


def header_cells(output: str):
    """Cell values of the header row of a rendered Rich table."""
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("┃"):
            return [cell.strip() for cell in line.strip("┃").split("┃")]
    return []
