"""Decorators for command functions."""

import asyncio
import functools
import inspect
import time
import traceback
from collections.abc import Callable

import typer

from smartdash_cli.models.exceptions import AuthError, SmartDashError
from smartdash_cli.services.context_manager import get_app_context
from smartdash_cli.utils.exit_codes import ERROR_AUTH_FAILURE, exit_code_for
from smartdash_cli.utils.logger import get_logger
from smartdash_cli.utils.ui.formatters import format_error


def _require_auth() -> None:
    """Require user to be authenticated."""
    if not get_app_context().auth.is_authenticated:
        format_error("Not logged in. Use 'smartdash login' to authenticate.")
        raise typer.Exit(ERROR_AUTH_FAILURE)


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


async def _run_async(func: Callable, *args, **kwargs):
    """Run a coroutine command and release the HTTP connection pool afterwards."""
    try:
        return await func(*args, **kwargs)
    finally:
        await get_app_context().client.close()


def command_wrapper(_func: Callable | None = None, *, auth_required: bool = True):
    """Decorator to wrap command functions with common functionality."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                # 1. Handle Auth
                if auth_required:
                    _require_auth()

                # 2. Run Sync or Async
                if inspect.iscoroutinefunction(func):
                    result = asyncio.run(_run_async(func, *args, **kwargs))
                else:
                    result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except AppError as e:
                elapsed = time.monotonic() - start
                logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
                format_error(str(e))
                raise typer.Exit(code=e.exit_code) from e

            except AuthError as e:
                # The server no longer accepts the token; drop the session.
                elapsed = time.monotonic() - start
                logger.warning(
                    "command failed: %s (%.3fs) - session rejected: %s", cmd, elapsed, e.message
                )
                get_app_context().auth.logout()
                format_error(f"{e.message}. You have been logged out; run 'smartdash login'.")
                raise typer.Exit(code=ERROR_AUTH_FAILURE) from e

            except SmartDashError as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s: %s",
                    cmd,
                    elapsed,
                    type(e).__name__,
                    e.message,
                )
                format_error(e.message)
                raise typer.Exit(code=exit_code_for(e)) from e

            except typer.Exit:
                # Re-raise Typer's own exits (like --help or explicit Exit(0))
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=1) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
