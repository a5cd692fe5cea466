"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from envkit.cli.output import user_error

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns predictable failures into `Error: ...` and exit code 1.

    Catches:
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration. envkit's own errors
          subclass it:
            ConfigError: unparseable or malformed pyproject.toml
            UnknownHookError: hook id missing from the registry
            DuplicateHookError: malformed hook table
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            user_error(str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            user_error(str(e))
            raise SystemExit(1) from None
        except PermissionError as e:
            user_error(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
