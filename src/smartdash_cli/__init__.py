"""SmartDash CLI - a terminal dashboard for a personal task list."""

__version__ = "0.3.0"
