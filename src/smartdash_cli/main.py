"""Main entry point for SmartDash CLI."""

import typer

from smartdash_cli import __version__
from smartdash_cli.commands import auth, calendar_command, config, dashboard, stats, tasks
from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.exit_codes import ERROR_INVALID_ARGS
from smartdash_cli.utils.typer_helpers import SuggestingGroup
from smartdash_cli.utils.ui.console import get_console, set_dark_mode
from smartdash_cli.utils.ui.formatters import format_error

# Create main app with custom group class
app = typer.Typer(
    name="smartdash",
    cls=SuggestingGroup,
    help="A terminal dashboard for your SmartDash task list",
    no_args_is_help=True,
)

# Add subcommands
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("login")(auth.login)
app.command("signup")(auth.signup)
app.command("logout")(auth.logout)
app.command("status")(auth.status)
app.command("stats")(stats.stats)
app.command("calendar")(calendar_command.show_calendar)
app.command("dashboard")(dashboard.dashboard)


@app.callback()
def main_callback() -> None:
    """A terminal dashboard for your SmartDash task list."""
    try:
        set_dark_mode(get_app_context().preferences.dark_mode)
    except (ValueError, RuntimeError) as e:
        format_error(str(e))
        raise typer.Exit(ERROR_INVALID_ARGS) from e


@app.command()
def version() -> None:
    """Show version information and the endpoint in use."""
    ctx = get_app_context()
    console = get_console()
    console.print(f"[bold]SmartDash CLI[/bold] version [accent]{__version__}[/accent]")
    console.print(
        f"[muted]{ctx.config_service.environment}: {ctx.client.base_url}[/muted]"
    )


if __name__ == "__main__":
    app()
