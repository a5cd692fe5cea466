"""Commands for inspecting and exporting the pre-commit hook registry."""

import logging
from collections.abc import Mapping
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from envkit.cli.commands.forbid_binary_files import forbid_binary_files_cmd
from envkit.cli.error_boundary import cli_error_boundary
from envkit.cli.output import machine_output, user_output
from envkit.core.context import EnvkitContext
from envkit.core.hooks.export import render_pre_commit_config
from envkit.core.hooks.overrides import UnknownHookError, apply_overrides
from envkit.core.hooks.registry import build_registry
from envkit.core.hooks.types import HookSpec
from envkit.core.repo_config import write_hook_enabled

logger = logging.getLogger(__name__)


def effective_registry(ctx: EnvkitContext) -> Mapping[str, HookSpec]:
    """Build the registry and layer the repository's per-hook settings on top."""
    registry = build_registry(ctx.config.hook_defaults())
    return apply_overrides(registry, ctx.config.hooks)


def _format_set(values: frozenset[str]) -> str:
    return ", ".join(sorted(values)) if values else "-"


@click.group("hooks")
def hooks_group() -> None:
    """Inspect and export pre-commit hooks."""


@hooks_group.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include disabled hooks.")
@click.pass_obj
@cli_error_boundary
def list_hooks(ctx: EnvkitContext, show_all: bool) -> None:
    """List registered hooks."""
    registry = effective_registry(ctx)

    table = Table(show_header=True, header_style="bold")
    table.add_column("id", style="cyan", no_wrap=True)
    table.add_column("enabled", no_wrap=True)
    table.add_column("types", no_wrap=True)
    table.add_column("excludes")
    table.add_column("entry")

    for spec in registry.values():
        if not spec.enabled and not show_all:
            continue
        table.add_row(
            spec.id,
            "yes" if spec.enabled else "no",
            _format_set(spec.types),
            _format_set(spec.excludes),
            spec.entry,
        )

    console = Console(stderr=True, width=200)
    console.print(table)


@hooks_group.command("show")
@click.argument("hook_id", metavar="HOOK_ID")
@click.pass_obj
@cli_error_boundary
def show_hook(ctx: EnvkitContext, hook_id: str) -> None:
    """Print every field of one hook."""
    registry = effective_registry(ctx)
    if hook_id not in registry:
        raise UnknownHookError(hook_id, sorted(registry))

    spec = registry[hook_id]
    click.echo(f"id={spec.id}")
    click.echo(f"name={spec.name}")
    click.echo(f"enabled={str(spec.enabled).lower()}")
    click.echo(f"description={spec.description}")
    click.echo(f"types={_format_set(spec.types)}")
    click.echo(f"excludes={_format_set(spec.excludes)}")
    click.echo(f"entry={spec.entry}")
    for package, replacement in sorted(spec.package_overrides.items()):
        click.echo(f"package_overrides.{package}={replacement}")


@hooks_group.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.pass_obj
@cli_error_boundary
def export_hooks(ctx: EnvkitContext, output_path: Path | None) -> None:
    """Render enabled hooks as a .pre-commit-config.yaml document."""
    content = render_pre_commit_config(effective_registry(ctx))

    if output_path is None:
        machine_output(content, nl=False)
        return

    output_path.write_text(content, encoding="utf-8")
    user_output(f"Wrote {output_path}")


def _set_enabled(ctx: EnvkitContext, hook_id: str, enabled: bool) -> None:
    registry = build_registry(ctx.config.hook_defaults())
    if hook_id not in registry:
        raise UnknownHookError(hook_id, sorted(registry))

    logger.debug("Setting %s enable=%s in %s", hook_id, enabled, ctx.repo_root)
    write_hook_enabled(ctx.repo_root, hook_id, enabled)
    state = "Enabled" if enabled else "Disabled"
    user_output(f"{state} {hook_id} in {ctx.repo_root / 'pyproject.toml'}")


@hooks_group.command("enable")
@click.argument("hook_id", metavar="HOOK_ID")
@click.pass_obj
@cli_error_boundary
def enable_hook(ctx: EnvkitContext, hook_id: str) -> None:
    """Enable a hook in pyproject.toml."""
    _set_enabled(ctx, hook_id, True)


@hooks_group.command("disable")
@click.argument("hook_id", metavar="HOOK_ID")
@click.pass_obj
@cli_error_boundary
def disable_hook(ctx: EnvkitContext, hook_id: str) -> None:
    """Disable a hook in pyproject.toml."""
    _set_enabled(ctx, hook_id, False)


hooks_group.add_command(forbid_binary_files_cmd)
