# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click

from dzip_lib.core.click_format import GNUHelpColorsGroup
from dzip_lib.rename_zip.cli import rename_zip
from dzip_lib.zip.cli import zip_dir

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=GNUHelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of dzip and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any dzip command.

    dzip recursively compresses a directory into a ZIP archive, optionally excluding
    selected paths, adding extra files and nesting the content in a wrapper folder.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(zip_dir)
cli.add_command(rename_zip)
