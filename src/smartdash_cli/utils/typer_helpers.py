"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from smartdash_cli.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Command group that answers an unknown command with the closest names."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            typed = args[0]
            close = get_close_matches(typed, self.list_commands(ctx), n=3, cutoff=0.6)
            if not close:
                raise

            console = get_console()
            console.print(f'[red]Error:[/red] no command "{typed}" in "{ctx.command_path}"')
            console.print()
            heading = "Did you mean this?" if len(close) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for name in close:
                console.print(f"    {ctx.command_path} {name}")
            raise typer.Exit(1) from e
