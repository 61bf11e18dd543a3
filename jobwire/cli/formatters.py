"""Row printers backing the ``--format`` option."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

FORMATS = ("table", "jsonl")

Row = Mapping[str, object]


@dataclass(frozen=True, slots=True)
class RowPrinter:
    """Print command results as a rich table or as JSON lines.

    Absent values print as ``-`` in a table and as ``null`` in JSON.
    """

    format: str = "table"
    no_color: bool = False

    def print(self, rows: Sequence[Row], columns: Sequence[str], *, stream: TextIO) -> None:
        if self.format == "jsonl":
            for row in rows:
                line = {column: row.get(column) for column in columns}
                stream.write(json.dumps(line, ensure_ascii=False, default=str))
                stream.write("\n")
            stream.flush()
            return

        table = Table(box=SIMPLE)
        for column in columns:
            table.add_column(column, header_style="" if self.no_color else "bold", overflow="fold")
        for row in rows:
            table.add_row(*("-" if row.get(column) is None else str(row.get(column)) for column in columns))
        Console(file=stream, no_color=self.no_color, color_system=None if self.no_color else "auto").print(table)


def create_formatter(name: str, *, no_color: bool = False) -> RowPrinter:
    """Return the printer for ``name``; raises ``ValueError`` for unknown formats."""

    normalized = name.strip().lower()
    if normalized not in FORMATS:
        raise ValueError(f"Unsupported format '{name}'. Available formats: {', '.join(FORMATS)}.")
    return RowPrinter(format=normalized, no_color=no_color)


__all__ = ["FORMATS", "RowPrinter", "create_formatter"]
