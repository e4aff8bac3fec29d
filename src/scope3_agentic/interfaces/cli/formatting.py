# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Output formatting for CLI results: json, table and list."""

import json
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

OUTPUT_FORMATS = ("json", "table", "list")


def _plain(console: Console, text: Any) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _cell(value: Any, indent: Optional[int] = None) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=indent, default=str)
    return str(value)


def unwrap(data: Any) -> Any:
    """Strip the response wrappers: ``data`` first, then ``items``."""
    actual = (data.get("data") or data) if isinstance(data, dict) else data
    if isinstance(actual, dict) and isinstance(actual.get("items"), list):
        actual = actual["items"]
    return actual


def _print_list(rows: list, console: Console) -> None:
    for index, item in enumerate(rows, 1):
        console.print(f"\n[cyan]{index}.[/cyan]")
        if not isinstance(item, dict):
            _plain(console, f"  {_cell(item)}")
            continue
        for key, value in item.items():
            display = "[dim](empty)[/dim]" if value is None else escape(_cell(value, indent=2))
            console.print(f"  [yellow]{escape(str(key))}[/yellow]: {display}", highlight=False, soft_wrap=True)
    console.print()


def _print_rows_table(rows: list, console: Console) -> None:
    if not isinstance(rows[0], dict):
        for item in rows:
            _plain(console, _cell(item))
        return

    keys = list(rows[0].keys())
    table = Table()
    for key in keys:
        table.add_column(str(key), style="cyan", overflow="fold")
    for item in rows:
        row = item if isinstance(item, dict) else {}
        table.add_row(*(escape(_cell(row.get(key))) for key in keys))
    console.print(table)


def _print_object_table(obj: dict, console: Console) -> None:
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    for key, value in obj.items():
        table.add_row(escape(str(key)), escape(_cell(value, indent=2)))
    console.print(table)


def format_output(data: Any, output_format: str = "table", console: Optional[Console] = None) -> None:
    """Print a tool result in the requested format.

    Args:
        data: Result returned by a client call
        output_format: "json", "table" or "list" (unknown values use table)
        console: Console to print to
    """
    console = console or Console()

    if output_format == "json":
        _plain(console, json.dumps(data, indent=2, default=str))
        return

    if data is None or data == "":
        console.print("[yellow]No data to display[/yellow]")
        return

    actual = unwrap(data)

    if isinstance(actual, dict) and list(actual.keys()) == ["message"]:
        _plain(console, str(actual["message"]))
        return

    if isinstance(actual, list):
        if not actual:
            console.print("[yellow]No results found[/yellow]")
            return
        if output_format == "list":
            _print_list(actual, console)
        else:
            _print_rows_table(actual, console)
    elif isinstance(actual, dict):
        _print_object_table(actual, console)
    else:
        _plain(console, actual)

    if isinstance(data, dict) and "success" in data:
        console.print("[green]✓ Success[/green]" if data["success"] else "[red]✗ Failed[/red]")
