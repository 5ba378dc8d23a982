# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click

from dzip_lib.archive import compress_directory
from dzip_lib.core.click_format import GNUHelpColorsCommand
from dzip_lib.core.config import CFG
from dzip_lib.core.error import DZipError
from dzip_lib.core.logger import get_logger
from dzip_lib.rename_zip.renamer import Renamer

logger = get_logger(__name__)


@click.command(
    "rename-zip",
    short_help="Compress a directory under a different name.",
    help=f"""Temporarily rename the directory DIR to NEW_NAME and compress it into '<NEW_NAME>{CFG.renamer.archive_suffix}' in the current directory.

NEW_NAME is a bare directory name; DIR is renamed in place, inside its parent directory.
Once the archive is created (or creating it fails), DIR is renamed back to its original name.
If the original name cannot be restored, you will be asked to restore it manually.

With `--windows-style`, the content of the archive is nested in a folder named NEW_NAME.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.option(
    "-d",
    "--dir",
    "directory",
    type=str,
    required=True,
    help="The directory to rename and compress, relative to the current directory.",
)
@click.option(
    "-n",
    "--new-name",
    type=str,
    required=True,
    help="New name of the directory (without any path).",
)
@click.option(
    "-w",
    "--windows-style",
    is_flag=True,
    help="Nest the content of the archive in a folder named NEW_NAME.",
)
def rename_zip(directory: str, new_name: str, windows_style: bool) -> NoReturn:
    """
    Rename the specified directory, compress it and restore its original name.
    """
    try:
        _rename_zip(Path.cwd(), directory, new_name, windows_style)
        sys.exit(0)
    except DZipError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def _rename_zip(cwd: Path, directory: str, new_name: str, windows_style: bool) -> int:
    """
    Rename the directory, compress it under the new name and restore its original name.

    Args:
        cwd (Path): The directory the archive is created in and `directory` is resolved against.
        directory (str): The directory to rename and compress.
        new_name (str): The new name of the directory.
        windows_style (bool): Whether to nest the content in a folder named `new_name`.

    Returns:
        int: The number of compressed files.

    Raises:
        DZipError: If the directory cannot be renamed or the archive could not be created.
    """
    renamer = Renamer(cwd / directory, new_name)
    renamer.ensureValid()

    renamed = renamer.rename()
    try:
        return compress_directory(
            cwd / f"{new_name}{CFG.renamer.archive_suffix}",
            renamed,
            windows_style=windows_style,
        )
    finally:
        renamer.restore()
