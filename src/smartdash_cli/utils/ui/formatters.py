"""Output formatters for different formats."""

import json
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

import yaml
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from smartdash_cli.models.progress import TaskProgress
from smartdash_cli.models.task import Task
from smartdash_cli.utils.calendar_grid import weekday_headers
from smartdash_cli.utils.ui.console import get_console


def tasks_to_dicts(tasks: Sequence[Task]) -> list[dict]:
    """Wire representation of *tasks*, for json/yaml output."""
    return [t.model_dump(mode="json", by_alias=True, exclude_none=True) for t in tasks]


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data (dicts/lists) based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="")
    elif isinstance(data, Mapping):
        format_single_item(data)
    else:
        get_console().print(data)


def format_single_item(item: Mapping) -> None:
    """Format a single item as a two-column key/value table."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="accent")
    table.add_column("Value")

    for key, value in item.items():
        if isinstance(value, Mapping):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        table.add_row(str(key), str(value))

    get_console().print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")


def format_tasks(tasks: Sequence[Task], output_format: str = "pretty") -> None:
    """Display the task list. Rows are numbered so commands can refer to them."""
    if output_format != "pretty":
        format_output(tasks_to_dicts(tasks), output_format)
        return

    console = get_console()
    if not tasks:
        console.print("[muted]No tasks yet. Add your first task to get started.[/muted]")
        return

    table = Table(title=f"Tasks ({len(tasks)})", title_justify="left")
    table.add_column("#", justify="right", style="muted")
    table.add_column("", width=1)
    table.add_column("Title")
    table.add_column("ID", style="muted")

    for number, task in enumerate(tasks, start=1):
        mark = "✓" if task.completed else "○"
        title = Text(task.title, style="done" if task.completed else "todo")
        table.add_row(str(number), mark, title, task.id)

    console.print(table)


def get_progress_bar(percentage: float, width: int = 20) -> str:
    """Get a progress bar representation."""
    filled = int(round(percentage / 100 * width))
    filled = max(0, min(width, filled))
    return "▓" * filled + "░" * (width - filled)


def get_completion_color(percentage: float) -> str:
    """Get color based on completion percentage."""
    if percentage >= 80:
        return "green"
    if percentage >= 40:
        return "yellow"
    return "red"


def format_progress(progress: TaskProgress, output_format: str = "pretty") -> None:
    """Display the progress overview."""
    percent = progress.percent_complete
    if output_format != "pretty":
        format_output(
            {
                "total": progress.total,
                "completed": progress.completed_count,
                "remaining": progress.remaining_count,
                "percent_complete": round(percent, 1),
            },
            output_format,
        )
        return

    color = get_completion_color(percent)
    lines = [
        f"[{color}]{get_progress_bar(percent)}[/{color}]  [bold]{round(percent)}%[/bold] complete",
        "",
        f"Total Tasks   [bold]{progress.total}[/bold]",
        f"Completed     [bold]{progress.completed_count}[/bold]",
        f"Remaining     [bold]{progress.remaining_count}[/bold]",
    ]
    if progress.headline:
        lines += ["", f"[accent]{progress.headline}[/accent]", f"[muted]{progress.detail}[/muted]"]

    get_console().print(Panel("\n".join(lines), title="Progress Overview", expand=False))


def format_calendar(
    title: str,
    grid: list[list[date | None]],
    *,
    today: date | None = None,
    marked: Mapping[date, int] | None = None,
    first_weekday: int = 6,
) -> None:
    """Render a month grid. *marked* maps days to a count shown as a dot."""
    marked = marked or {}
    table = Table(title=title, show_lines=False, box=None, padding=(0, 1))
    for header in weekday_headers(first_weekday):
        table.add_column(header, justify="right", style="muted")

    for week in grid:
        cells = []
        for day in week:
            if day is None:
                cells.append("")
                continue
            label = f"{day.day:>2}"
            style = "todo"
            if day in marked:
                label += "•"
                style = "marked"
            if day == today:
                style = "today"
            cells.append(Text(label, style=style))
        table.add_row(*cells)

    get_console().print(table)
