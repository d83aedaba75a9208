"""Console output for model descriptions."""

import re
from dataclasses import fields
from typing import Iterable, Optional

from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from .introspector import BasicInfo, PrimaryKeyInfo, PropertyInfo

DEFAULT_SCALAR_TYPE_LABEL = "PHP type"

# Upper bound used to measure the unconstrained width of the table
MAX_TABLE_WIDTH = 10_000

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-\s]+")


def humanize_key(key: str) -> str:
    """Turn an identifier into a label: ``default_page_size`` -> ``Default page size``."""
    words = [word.lower() for word in _WORD_BOUNDARY.split(key) if word]
    label = " ".join(words)
    return label[:1].upper() + label[1:]


def format_primary_key(key: PrimaryKeyInfo) -> str:
    """Render a primary key as ``id (incrementing integer)``."""
    incrementing_text = "incrementing " if key.incrementing else ""
    return f"{key.name} ({incrementing_text}{key.storage_type})"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class Reporter:
    """Prints basic info lines and the property table."""

    def __init__(self, console: Optional[Console] = None, scalar_type_label: str = DEFAULT_SCALAR_TYPE_LABEL):
        self.console = console or Console()
        self.scalar_type_label = scalar_type_label

    @property
    def headers(self):
        return ["Name", self.scalar_type_label, "DB type", "Casts", "Fillable", "Guarded", "Visible", "Hidden"]

    def print_basic(self, info: BasicInfo) -> None:
        """Prints table name, primary key and default page size in separate lines."""
        for item in fields(info):
            value = getattr(info, item.name)
            if isinstance(value, PrimaryKeyInfo):
                value = format_primary_key(value)
            self.console.print(f"{humanize_key(item.name)}: {value}", markup=False, highlight=False)

    def build_table(self, columns: Iterable[str], info: PropertyInfo) -> Table:
        """Build the property table, one row per column in the given order."""
        table = Table()
        for header in self.headers:
            table.add_column(header, no_wrap=True)

        for column in columns:
            table.add_row(
                Text(column),
                Text(str(info.scalar_types.get(column, ""))),
                Text(info.storage_types.get(column, "")),
                Text(str(info.casts.get(column, ""))),
                _yes_no(column in info.fillable),
                _yes_no(column in info.guarded),
                _yes_no(column in info.visible),
                _yes_no(column in info.hidden),
            )
        return table

    def print_table(self, columns: Iterable[str], info: PropertyInfo) -> None:
        """Prints model properties in form of a table.

        Cells are never cut to fit the console. When the table is wider
        than the console it keeps its natural width and overflows.
        """
        table = self.build_table(columns, info)
        options = self.console.options.update_width(MAX_TABLE_WIDTH)
        natural_width = Measurement.get(self.console, options, table).maximum
        if natural_width > self.console.width:
            table.width = natural_width
        self.console.print(table, crop=False)
