"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table
from rich.text import Text

from tasklist.models import Task
from tasklist.utils.task_helpers import DUE_DATE_FORMAT, is_overdue, task_row
from tasklist.utils.ui.console import get_console

console = get_console()


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display plain data (dicts / lists) based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_single_item(item: dict, prefix: str = "") -> None:
    """Format a (possibly nested) dict as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in _flatten(item, prefix):
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(key, formatted_value)

    console.print(table)


def _flatten(item: dict, prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for key, value in item.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(value, f"{full_key}."))
        else:
            rows.append((full_key, value))
    return rows


def format_tasks(
    tasks: list[Task],
    output_format: str = "table",
    date_format: str = DUE_DATE_FORMAT,
) -> None:
    """Display tasks in display order with their 1-based positions."""
    if output_format in ("json", "yaml"):
        data = [
            {"position": position, **task.model_dump(mode="json")}
            for position, task in enumerate(tasks, start=1)
        ]
        format_output(data, output_format)
        return

    if not tasks:
        console.print("[yellow]No tasks yet. Add one with 'tasklist add'.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("")
    table.add_column("Title")
    table.add_column("Due")
    table.add_column("Created / Done", style="dim")

    for position, task in enumerate(tasks, start=1):
        glyph, title, due, stamp = task_row(task, date_format)
        if task.is_complete:
            title_text = Text(title, style="strike dim")
            glyph_text = Text(glyph, style="green")
        else:
            title_text = Text(title)
            glyph_text = Text(glyph, style="cyan")
        due_text = Text(due, style="bold red" if is_overdue(task) else "")
        table.add_row(str(position), glyph_text, title_text, due_text, stamp)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
