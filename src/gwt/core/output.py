"""Output helpers with explicit routing.

user_output() is for humans and goes to stderr so that stdout stays clean.
machine_output() is for shell wrappers and scripts (e.g. a path to cd into).
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write scriptable output to stdout."""
    click.echo(message, nl=nl)


def warning_output(message: str) -> None:
    """Write a yellow warning line to stderr."""
    user_output(click.style(message, fg="yellow"))
