# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable
from pathlib import Path

from dzip_lib.core.error import DZipError
from dzip_lib.core.logger import get_logger

from .archiver import Archiver
from .extra import ExtraFile
from .ignore import IgnoreSet
from .progress import ProgressBar

logger = get_logger(__name__)


def compress_directory(
    zip_path: Path,
    root: Path,
    ignore_set: IgnoreSet | None = None,
    windows_style: bool = False,
    extra_files: Iterable[ExtraFile] = (),
) -> int:
    """
    Compress a directory into an archive while displaying a progress bar.

    Args:
        zip_path (Path): Absolute path to the archive to create.
        root (Path): The directory to compress.
        ignore_set (IgnoreSet | None): Paths relative to `root` to exclude.
        windows_style (bool): Whether to nest the entries in a folder named after `root`.
        extra_files (Iterable[ExtraFile]): Additional files to add to the archive.

    Returns:
        int: The number of files written into the archive.

    Raises:
        DZipError: If the archive could not be created.
    """
    with ProgressBar() as bar:
        archiver = Archiver(
            zip_path,
            root,
            ignore_set,
            windows_style,
            extra_files,
            on_progress=bar.update,
        )
        processed = archiver.compress()

    if not archiver.wasCreated():
        raise DZipError(f"Archive '{zip_path}' could not be created.")

    logger.info(
        f"Compression finished: processed {processed} files, archive written to '{zip_path}'."
    )
    return processed
