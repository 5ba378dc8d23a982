# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click

from dzip_lib.archive import ExtraFile, IgnoreSet, compress_directory
from dzip_lib.core.click_format import GNUHelpColorsCommand
from dzip_lib.core.common import split_paths_list
from dzip_lib.core.config import CFG
from dzip_lib.core.error import DZipError
from dzip_lib.core.logger import get_logger

logger = get_logger(__name__)


@click.command(
    "zip",
    short_help="Compress a directory into an archive.",
    help=f"""Compress the directory DIR into an archive in the current directory.

All files and directories inside DIR are added to the archive, including empty directories.
Paths listed using `--ignore` are relative to DIR and are excluded from the archive.
Ignored directories are excluded together with their entire content.

Files listed using `--extra` are added to the top level of the archive, under their path
relative to the current directory (or under their file name if they are located outside of it).

With `--windows-style`, the content of DIR is nested in a folder named after DIR,
like archives created by file managers on Windows.

The archive itself is never added to the archive, even if it is located inside DIR.
Default archive name is '{CFG.archiver.default_filename}'.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.option(
    "-f",
    "--filename",
    type=str,
    default=CFG.archiver.default_filename,
    show_default=True,
    help="Name of the archive to create in the current directory.",
)
@click.option(
    "-d",
    "--dir",
    "directory",
    type=str,
    required=True,
    help="The directory to compress, relative to the current directory.",
)
@click.option(
    "-i",
    "--ignore",
    type=str,
    multiple=True,
    help="""Paths relative to DIR to exclude from the archive.
Can be used multiple times or with a comma-separated list.""",
)
@click.option(
    "-e",
    "--extra",
    type=str,
    multiple=True,
    help="""Additional files to add to the archive.
Can be used multiple times or with a comma-separated list.""",
)
@click.option(
    "-w",
    "--windows-style",
    is_flag=True,
    help="Nest the content of the archive in a folder named after the compressed directory.",
)
def zip_dir(
    filename: str,
    directory: str,
    ignore: tuple[str, ...],
    extra: tuple[str, ...],
    windows_style: bool,
) -> NoReturn:
    """
    Compress the specified directory into an archive in the current directory.
    """
    try:
        _zip(
            Path.cwd(),
            filename,
            directory,
            split_paths_list(ignore),
            split_paths_list(extra),
            windows_style,
        )
        sys.exit(0)
    except DZipError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def _zip(
    cwd: Path,
    filename: str,
    directory: str,
    ignore: list[str],
    extra: list[str],
    windows_style: bool,
) -> int:
    """
    Validate the input and compress the directory.

    Args:
        cwd (Path): The directory the archive is created in and relative paths are resolved against.
        filename (str): Name of the archive.
        directory (str): The directory to compress.
        ignore (list[str]): Paths relative to `directory` to exclude.
        extra (list[str]): Additional files to add to the archive.
        windows_style (bool): Whether to nest the content in a folder named after the directory.

    Returns:
        int: The number of compressed files.

    Raises:
        DZipError: If the directory or any of the extra files does not exist
            or the archive could not be created.
    """
    root = (cwd / directory).resolve()
    if not root.exists():
        raise DZipError(f"Directory to compress '{root}' does not exist.")
    if not root.is_dir():
        raise DZipError(f"'{root}' is not a directory.")

    # validated before the archive is created
    extra_files = [ExtraFile.fromPath(path, cwd) for path in extra]

    return compress_directory(
        cwd / filename,
        root,
        IgnoreSet(ignore),
        windows_style,
        extra_files,
    )
