"""Authentication commands."""

import typer

from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.ui.console import get_console
from smartdash_cli.utils.ui.formatters import format_info, format_single_item, format_success

from .decorators import command_wrapper


@command_wrapper(auth_required=False)
async def login(
    email: str | None = typer.Option(None, "--email", help="Email address"),
    password: str | None = typer.Option(None, "--password", help="Password"),
) -> None:
    """Login to SmartDash."""
    if not email:
        email = typer.prompt("Email")
    if not password:
        password = typer.prompt("Password", hide_input=True)

    await get_app_context().auth.login(email, password)
    format_success(f"Logged in as {email}")


@command_wrapper(auth_required=False)
async def signup(
    name: str | None = typer.Option(None, "--name", help="Your name"),
    email: str | None = typer.Option(None, "--email", help="Email address"),
    password: str | None = typer.Option(None, "--password", help="Password"),
    note: str | None = typer.Option(None, "--note", help="Optional note for your profile"),
    then_login: bool = typer.Option(
        False, "--login/--no-login", help="Log in right after the account is created"
    ),
) -> None:
    """Create a new SmartDash account."""
    if not name:
        name = typer.prompt("Name")
    if not email:
        email = typer.prompt("Email")
    if not password:
        password = typer.prompt("Password", hide_input=True, confirmation_prompt=True)

    ctx = get_app_context()
    await ctx.auth.signup(name, email, password, note=note)
    format_success(f"Account created for {email}")

    if then_login:
        await ctx.auth.login(email, password)
        format_success(f"Logged in as {email}")
    else:
        format_info("Run 'smartdash login' to sign in.")


@command_wrapper(auth_required=False)
def logout() -> None:
    """Logout from SmartDash."""
    ctx = get_app_context()
    if not ctx.auth.is_authenticated:
        get_console().print("[muted]Not logged in.[/muted]")
        return
    ctx.auth.logout()
    format_success("Logged out")


@command_wrapper(auth_required=False)
def status() -> None:
    """Show session, environment and endpoint."""
    ctx = get_app_context()
    format_single_item(
        {
            "Logged in": "yes" if ctx.auth.is_authenticated else "no",
            "Environment": ctx.config_service.environment,
            "Endpoint": ctx.client.base_url,
            "Theme": "dark" if ctx.preferences.dark_mode else "light",
        }
    )
