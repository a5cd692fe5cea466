"""Commands for the native build toolchain."""

import json
import shlex
from dataclasses import asdict

import click

from envkit.cli.output import machine_output
from envkit.core.context import EnvkitContext
from envkit.core.toolchain.environment import toolchain_environment
from envkit.core.toolchain.selector import detect_platform, select_toolchain
from envkit.core.toolchain.types import ToolchainSpec, llvm_baseline


def current_toolchain(ctx: EnvkitContext) -> ToolchainSpec:
    """Select the toolchain for the host the CLI runs on."""
    return select_toolchain(detect_platform(ctx.host), llvm_baseline())


@click.group("toolchain")
def toolchain_group() -> None:
    """Show the C/C++ toolchain selected for this host."""


@toolchain_group.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
def show_toolchain(ctx: EnvkitContext, as_json: bool) -> None:
    """Print the selected compiler, standard library and linker."""
    spec = current_toolchain(ctx)

    if as_json:
        data = asdict(spec)
        data["platform"] = str(spec.platform)
        machine_output(json.dumps(data, indent=2))
        return

    click.echo(f"platform={spec.platform}")
    click.echo(f"compiler_frontend={spec.compiler_frontend}")
    click.echo(f"standard_library={spec.standard_library}")
    click.echo(f"compiler_runtime={spec.compiler_runtime}")
    click.echo(f"linker={spec.linker}")


@toolchain_group.command("env")
@click.pass_obj
def toolchain_env(ctx: EnvkitContext) -> None:
    """Print shell exports for the selected toolchain.

    Intended for eval: eval "$(envkit toolchain env)"
    """
    for key, value in toolchain_environment(current_toolchain(ctx)).items():
        machine_output(f"export {key}={shlex.quote(value)}")
