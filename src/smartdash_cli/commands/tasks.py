"""Task management commands."""

import typer

from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.task_helpers import resolve_task_ref
from smartdash_cli.utils.typer_helpers import SuggestingGroup
from smartdash_cli.utils.ui.formatters import format_success, format_tasks

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")

_OUTPUT_FORMATS = ("pretty", "json", "yaml")


def resolve_output(output: str | None) -> str:
    """Pick the output format: the option if given, else the configured default."""
    if output is None:
        return get_app_context().config_service.config.output.format
    if output not in _OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Use one of: {', '.join(_OUTPUT_FORMATS)}",
            exit_code=2,
        )
    return output


@app.command("list")
@command_wrapper
async def list_tasks(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/json/yaml)"
    ),
) -> None:
    """List your tasks."""
    output = resolve_output(output)
    repo = get_app_context().tasks
    await repo.load()
    format_tasks(repo.tasks, output)


@app.command("add")
@command_wrapper
async def add_task(
    title: str = typer.Argument(..., help="Task title"),
) -> None:
    """Add a task."""
    repo = get_app_context().tasks
    await repo.load()
    task = await repo.add(title)
    format_success(f"Added '{task.title}'")
    format_tasks(repo.tasks)


@app.command("done")
@command_wrapper
async def toggle_task(
    task: str = typer.Argument(..., help="Row number, task ID or ID suffix"),
) -> None:
    """Toggle a task between done and not done."""
    repo = get_app_context().tasks
    await repo.load()
    task_id = resolve_task_ref(repo.tasks, task)
    updated = await repo.toggle(task_id)
    state = "done" if updated.completed else "not done"
    format_success(f"Marked '{updated.title}' as {state}")
    format_tasks(repo.tasks)


@app.command("delete")
@command_wrapper
async def delete_task(
    task: str = typer.Argument(..., help="Row number, task ID or ID suffix"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    repo = get_app_context().tasks
    await repo.load()
    task_id = resolve_task_ref(repo.tasks, task)
    title = repo.get(task_id).title
    if not yes and not typer.confirm(f"Delete '{title}'?"):
        raise typer.Exit(0)
    await repo.remove(task_id)
    format_success(f"Deleted '{title}'")
    format_tasks(repo.tasks)
