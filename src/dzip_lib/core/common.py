# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the dzip library.

This module provides helpers for splitting path lists given on the command line
and for turning filesystem paths into archive entry names.
"""

import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from .logger import get_logger

logger = get_logger(__name__)


def split_paths_list(values: Iterable[str] | str | None) -> list[str]:
    """
    Split path lists provided on the command line into individual paths.

    Each value may itself contain several paths separated by commas.
    Empty items (e.g. caused by trailing commas) are dropped. Whitespace
    is preserved since it may be a part of a file name.

    Args:
        values (Iterable[str] | str | None): A single string or multiple strings
            (one per occurrence of the option). If None or empty, an empty list is returned.

    Returns:
        list[str]: The individual paths in the order they were provided.
    """
    if not values:
        return []

    if isinstance(values, str):
        values = [values]

    return [item for value in values for item in value.split(",") if item]


def relative_entry_name(path: Path, base: Path) -> str:
    """
    Get the archive entry name of a file relative to a base directory.

    The entry name is the POSIX form of `path` relative to `base`. If no relative
    path can be constructed or the relative path escapes `base` (starts with '..'),
    the bare file name is used instead.

    Args:
        path (Path): Absolute path to the file.
        base (Path): Absolute path to the directory the entry name should be relative to.

    Returns:
        str: Archive entry name of the file.
    """
    try:
        relative = PurePosixPath(Path(os.path.relpath(path, base)).as_posix())
    except ValueError:
        # e.g. path and base are located on different drives
        logger.debug(f"Could not get path of '{path}' relative to '{base}'.")
        return path.name

    if not relative.parts or relative.parts[0] in (".", ".."):
        return path.name

    return str(relative)
