"""Interactive dashboard: one task collection, many edits.

The collection is loaded once and then kept in sync by the repository; the
screen is redrawn from its snapshot after every action. A failed action
leaves the list as it was and prints the error.
"""

import asyncio

from rich.prompt import Prompt

from smartdash_cli.models.exceptions import AuthError, SmartDashError
from smartdash_cli.services.context_manager import AppContext, get_app_context
from smartdash_cli.utils.task_helpers import resolve_task_ref
from smartdash_cli.utils.ui.console import get_console, set_dark_mode
from smartdash_cli.utils.ui.formatters import format_error, format_progress, format_tasks

from .decorators import command_wrapper

HELP_TEXT = (
    "[accent]add[/accent] <title>   [accent]done[/accent] <#|id>   "
    "[accent]rm[/accent] <#|id>   [accent]refresh[/accent]   "
    "[accent]theme[/accent]   [accent]help[/accent]   [accent]quit[/accent]"
)


def render(ctx: AppContext) -> None:
    """Redraw the task list and the progress panel."""
    format_tasks(ctx.tasks.tasks)
    format_progress(ctx.tasks.progress)


async def handle_line(ctx: AppContext, line: str) -> bool:
    """Apply one dashboard command. Returns False when the user wants to quit.

    Errors from the repository propagate to the caller.
    """
    verb, _, arg = line.strip().partition(" ")
    verb = verb.lower()
    arg = arg.strip()

    if verb in ("q", "quit", "exit"):
        return False
    if verb in ("", "help", "?"):
        get_console().print(HELP_TEXT)
    elif verb == "add":
        await ctx.tasks.add(arg)
    elif verb in ("done", "toggle"):
        await ctx.tasks.toggle(resolve_task_ref(ctx.tasks.tasks, arg))
    elif verb in ("rm", "delete"):
        await ctx.tasks.remove(resolve_task_ref(ctx.tasks.tasks, arg))
    elif verb == "refresh":
        await ctx.tasks.load()
    elif verb == "theme":
        ctx.preferences.dark_mode = not ctx.preferences.dark_mode
        set_dark_mode(ctx.preferences.dark_mode)
    else:
        format_error(f"Unknown command '{verb}'")
        get_console().print(HELP_TEXT)
    return True


@command_wrapper
async def dashboard() -> None:
    """Open the interactive task dashboard."""
    ctx = get_app_context()
    await ctx.tasks.load()
    render(ctx)
    get_console().print(HELP_TEXT)

    while True:
        try:
            line = await asyncio.to_thread(
                Prompt.ask, "[accent]smartdash[/accent]", console=get_console()
            )
        except (EOFError, KeyboardInterrupt):
            get_console().print()
            break

        try:
            if not await handle_line(ctx, line):
                break
        except AuthError:
            raise
        except SmartDashError as e:
            format_error(e.message)
            continue
        render(ctx)
