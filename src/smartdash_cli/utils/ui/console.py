"""Console utilities for SmartDash CLI."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

LIGHT_THEME = Theme(
    {
        "accent": "bold blue",
        "muted": "grey50",
        "done": "grey50 strike",
        "todo": "black",
        "today": "bold reverse blue",
        "marked": "bold blue",
    }
)

DARK_THEME = Theme(
    {
        "accent": "bold cyan",
        "muted": "grey62",
        "done": "grey50 strike",
        "todo": "bright_white",
        "today": "bold reverse cyan",
        "marked": "bold magenta",
    }
)

_dark_mode = False


def set_dark_mode(enabled: bool) -> None:
    """Switch the theme used by consoles handed out from now on."""
    global _dark_mode
    _dark_mode = enabled
    get_console.cache_clear()


def is_dark_mode() -> bool:
    return _dark_mode


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight, theme=DARK_THEME if _dark_mode else LIGHT_THEME)
