import logging
import os

import click

from envkit.cli.commands.hooks import hooks_group
from envkit.cli.commands.toolchain import toolchain_group
from envkit.cli.output import user_error
from envkit.core.context import create_context
from envkit.core.repo_config import ConfigError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging() -> None:
    # Enable debug logging if ENVKIT_DEBUG environment variable is set
    if os.getenv("ENVKIT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="envkit")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Pre-commit hooks and native toolchain for the development environment."""
    _configure_logging()
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ConfigError as e:
            user_error(str(e))
            raise SystemExit(1) from None


cli.add_command(hooks_group)
cli.add_command(toolchain_group)


def main() -> None:
    """CLI entry point used by the `envkit` console script."""
    cli()
