"""Command 'calendar' of smartdash-cli"""

from collections import Counter
from datetime import date, datetime

import typer

from smartdash_cli.models.task import Task
from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.calendar_grid import MONDAY, SUNDAY, month_grid
from smartdash_cli.utils.exit_codes import ERROR_AUTH_FAILURE
from smartdash_cli.utils.ui.formatters import format_calendar

from .decorators import AppError, command_wrapper


def _local_date(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def tasks_per_day(tasks: tuple[Task, ...] | list[Task]) -> Counter:
    """Count tasks by the local date they were created on."""
    return Counter(_local_date(t.created_at) for t in tasks if t.created_at is not None)


@command_wrapper(auth_required=False)
async def show_calendar(
    year: int | None = typer.Option(None, "--year", help="Year (default: this year)"),
    month: int | None = typer.Option(
        None, "--month", min=1, max=12, help="Month 1-12 (default: this month)"
    ),
    show_tasks: bool | None = typer.Option(
        None,
        "--tasks/--no-tasks",
        help="Mark days on which tasks were created (default: when logged in)",
    ),
    monday: bool = typer.Option(False, "--monday", help="Start weeks on Monday"),
) -> None:
    """Show a month calendar."""
    today = date.today()
    year = year or today.year
    month = month or today.month
    first_weekday = MONDAY if monday else SUNDAY

    ctx = get_app_context()
    if show_tasks is None:
        show_tasks = ctx.auth.is_authenticated

    marked: Counter = Counter()
    if show_tasks:
        if not ctx.auth.is_authenticated:
            raise AppError(
                "Not logged in. Use 'smartdash login' or pass --no-tasks.",
                exit_code=ERROR_AUTH_FAILURE,
            )
        await ctx.tasks.load()
        marked = tasks_per_day(ctx.tasks.tasks)

    title = date(year, month, 1).strftime("%B %Y")
    format_calendar(
        title,
        month_grid(year, month, first_weekday),
        today=today,
        marked=marked,
        first_weekday=first_weekday,
    )
