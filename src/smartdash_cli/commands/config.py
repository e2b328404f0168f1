"""Configuration management commands."""

import typer

from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.exit_codes import ERROR_INVALID_ARGS
from smartdash_cli.utils.typer_helpers import SuggestingGroup
from smartdash_cli.utils.ui.console import get_console, set_dark_mode
from smartdash_cli.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")


@app.command("show")
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="Output format (yaml/json)"),
) -> None:
    """Show the current configuration and the endpoint in use."""
    config_service = get_app_context().config_service
    try:
        data = config_service.config.model_dump()
        data["active"] = {
            "environment": config_service.environment,
            "endpoint": config_service.get_api_endpoint(),
        }
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_INVALID_ARGS) from e
    get_console().print(f"[muted]{config_service.config_path}[/muted]")
    format_output(data, output)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., environment, api.timeout)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_app_context().config_service.set_value(key, value)
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        raise typer.Exit(0)
    get_app_context().config_service.reset_config()
    format_success("Configuration reset to defaults")


@app.command("theme")
def theme(
    mode: str | None = typer.Argument(None, help="dark or light (omit to show the current theme)"),
) -> None:
    """Show or set the color theme."""
    preferences = get_app_context().preferences
    if mode is None:
        get_console().print("dark" if preferences.dark_mode else "light")
        return

    mode = mode.lower()
    if mode not in ("dark", "light"):
        format_error(f"Unknown theme '{mode}'. Use 'dark' or 'light'.")
        raise typer.Exit(ERROR_INVALID_ARGS)

    preferences.dark_mode = mode == "dark"
    set_dark_mode(preferences.dark_mode)
    format_success(f"Theme set to {mode}")
