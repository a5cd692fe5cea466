"""Entry point for the forbid-binary-files hook.

The hook runner passes every staged file it classified as binary. Any file at
all is a violation:

    forbid-binary-files            -> exit 0, no output
    forbid-binary-files a.png      -> "[ERROR] Found binary file: a.png", exit 1
"""

import click


def format_violation(filename: str) -> str:
    """Build the error line reported for one binary file."""
    return "[" + click.style("ERROR", fg="red") + f"] Found binary file: {filename}"


@click.command(
    "forbid-binary-files",
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
@click.argument("filenames", nargs=-1, type=click.UNPROCESSED)
def forbid_binary_files_cmd(filenames: tuple[str, ...]) -> None:
    """Fail when any FILENAMES are given."""
    if not filenames:
        return

    for filename in filenames:
        click.echo(format_violation(filename), err=True)
    raise SystemExit(1)


def main() -> None:
    """Console script entry point used by the `forbid-binary-files` hook."""
    forbid_binary_files_cmd()
