"""Output utilities for CLI commands with clear intent.

user_output() is for humans and goes to stderr. machine_output() is for
content other programs read (YAML, JSON, shell exports) and goes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable content to stdout."""
    click.echo(message, nl=nl)


def user_error(message: str) -> None:
    """Write a red "Error:" prefixed message to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
