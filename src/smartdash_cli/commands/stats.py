"""Progress statistics command."""

import typer

from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.ui.formatters import format_progress

from .decorators import command_wrapper
from .tasks import resolve_output


@command_wrapper
async def stats(
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format (pretty/json/yaml)"
    ),
) -> None:
    """Show the progress overview: total, completed, remaining."""
    output = resolve_output(output)
    repo = get_app_context().tasks
    await repo.load()
    format_progress(repo.progress, output)
