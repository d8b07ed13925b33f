"""Generic record formatter: table, csv, json, yaml, ids and count output."""

from __future__ import annotations

import csv
import json
import sys
from typing import Any, TextIO

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# width for non-terminal output, so piped tables keep one line per row
PIPE_WIDTH = 10_000

LIST_FORMATS = ["table", "csv", "json", "yaml", "ids", "count"]
ITEM_FORMATS = ["table", "json", "yaml"]
WIDGET_FORMATS = ["table", "csv", "json", "yaml", "ids"]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def records_table(fields: list[str], items: list[dict[str, Any]]) -> Table:
    table = Table(box=box.ASCII, show_edge=True, pad_edge=True)
    for name in fields:
        table.add_column(name, no_wrap=True)
    for item in items:
        table.add_row(*[Text(_text(item.get(name))) for name in fields])
    return table


def kv_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=box.ASCII, show_edge=True)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value", no_wrap=True)
    for key, value in rows:
        table.add_row(Text(key), Text(value))
    return table


class Formatter:
    """Render projected records to ``out`` in the selected encoding.

    ``field`` switches to single-field mode: one value per line (or a JSON
    array of values) instead of full records.
    """

    def __init__(self, fmt: str, fields: list[str], out: TextIO | None = None, field: str | None = None):
        self.format = fmt
        self.fields = list(fields)
        self.field = field
        self.out = out if out is not None else sys.stdout

    def _console(self) -> Console:
        console = Console(file=self.out, highlight=False, markup=False, soft_wrap=False)
        if not console.is_terminal:
            console.width = PIPE_WIDTH
        return console

    def _line(self, text: str) -> None:
        self.out.write(text + "\n")

    def display_ids(self, ids: list[str]) -> None:
        self._line(" ".join(ids))

    def display_count(self, count: int) -> None:
        self._line(str(int(count)))

    def display_items(self, items: list[dict[str, Any]]) -> None:
        if self.field:
            self._display_values([item.get(self.field) for item in items])
            return

        if self.format == "csv":
            writer = csv.writer(self.out, lineterminator="\n")
            writer.writerow(self.fields)
            for item in items:
                writer.writerow([_text(item.get(name)) for name in self.fields])
        elif self.format == "json":
            payload = [{name: item.get(name) for name in self.fields} for item in items]
            self._line(json.dumps(payload, indent=2, ensure_ascii=False))
        elif self.format == "yaml":
            payload = [{name: item.get(name) for name in self.fields} for item in items]
            self.out.write(_yaml_dump(payload))
        elif self.format == "table":
            if not items:
                return
            self._console().print(records_table(self.fields, items))
        else:
            raise ValueError(f"unsupported format for items: {self.format}")

    def display_item(self, item: dict[str, Any]) -> None:
        if self.field:
            self._display_values([item.get(self.field)], single=True)
            return

        payload = {name: item.get(name) for name in self.fields}
        if self.format == "json":
            self._line(json.dumps(payload, indent=2, ensure_ascii=False))
        elif self.format == "yaml":
            self.out.write(_yaml_dump(payload))
        elif self.format == "table":
            rows = [(name, _text(value)) for name, value in payload.items()]
            self._console().print(kv_table(rows))
        else:
            raise ValueError(f"unsupported format for item: {self.format}")

    def _display_values(self, values: list[Any], single: bool = False) -> None:
        if self.format == "json":
            self._line(json.dumps(values[0] if single else values, ensure_ascii=False))
            return
        for value in values:
            self._line(_text(value))


def _yaml_dump(payload: Any) -> str:
    return yaml.safe_dump(
        payload,
        explicit_start=True,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
