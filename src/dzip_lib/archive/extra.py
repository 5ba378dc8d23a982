# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from pathlib import Path
from typing import Self

from dzip_lib.core.common import relative_entry_name
from dzip_lib.core.error import DZipError


@dataclass(frozen=True)
class ExtraFile:
    """
    A file added to the archive independently of the directory walk.

    Attributes:
        source (Path): Absolute path to the file.
        entry_name (str): Name of the file inside the archive.
    """

    source: Path
    entry_name: str

    @classmethod
    def fromPath(cls, path: str | Path, base: Path) -> Self:
        """
        Create an ExtraFile from a path provided by the user.

        The entry name is the path relative to `base` unless it lies outside of it,
        in which case the bare file name is used.

        Args:
            path (str | Path): Path to the file, absolute or relative to `base`.
            base (Path): The directory relative paths are resolved against (usually the working directory).

        Returns:
            ExtraFile: The extra file with an absolute source path.

        Raises:
            DZipError: If the file does not exist or is not a regular file.
        """
        source = (base / path).resolve()
        if not source.exists():
            raise DZipError(f"Extra file '{source}' does not exist.")
        if not source.is_file():
            raise DZipError(f"Extra file '{source}' is not a regular file.")

        return cls(source, relative_entry_name(source, base.resolve()))

    def isValid(self) -> bool:
        """Check whether the source still exists and is a regular file."""
        return self.source.is_file()
