"""Error boundary handling for CLI commands.

This module provides a decorator to catch gwt's domain errors at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from gwt.core.errors import GwtError, TargetNotFoundError, UsageError
from gwt.core.output import user_output

T = TypeVar("T", bound=Callable[..., Any])


def _report(error: GwtError) -> None:
    user_output(click.style("Error: ", fg="red") + error.message)
    if isinstance(error, UsageError) and error.usage:
        user_output(f"Usage: {error.usage}")
    if isinstance(error, TargetNotFoundError) and error.available:
        user_output()
        user_output("Available worktrees:")
        for line in error.available:
            user_output(f"  {line}")


def cli_error_boundary(func: T) -> T:
    """Decorator that turns GwtError into a one-line error and exit code 1.

    Catches:
        - GwtError and subclasses: usage errors, discovery failures,
          protected targets, failed git invocations
        - OSError (FileExistsError, FileNotFoundError, PermissionError, ...)
          from filesystem steps such as removing, renaming or writing files
        - ValueError: Invalid input

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: GwtContext) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GwtError as e:
            _report(e)
            raise SystemExit(1) from None
        except OSError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
