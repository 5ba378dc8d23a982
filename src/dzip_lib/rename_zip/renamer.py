# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
from pathlib import Path

from dzip_lib.core.config import CFG
from dzip_lib.core.error import DZipError, DZipRenameError
from dzip_lib.core.logger import get_logger

logger = get_logger(__name__)


class Renamer:
    """
    Temporarily renames a directory within its parent directory.

    Attributes:
        original (Path): Absolute path to the directory under its original name.
        renamed (Path): Absolute path to the directory under the new name.
    """

    def __init__(self, directory: Path, new_name: str):
        """
        Initialize the Renamer.

        Args:
            directory (Path): The directory to rename.
            new_name (str): The new name of the directory (without any path).
        """
        self.original = directory.resolve()
        self.renamed = self.original.parent / new_name
        self._new_name = new_name

    def ensureValid(self) -> None:
        """
        Verify that the directory can be renamed.

        Raises:
            DZipError: If the directory does not exist or is not a directory,
                if the new name is empty or contains forbidden characters,
                or if a file with the new name already exists.
        """
        if not self.original.exists():
            raise DZipError(f"Directory '{self.original}' does not exist.")

        if not self.original.is_dir():
            raise DZipError(f"'{self.original}' is not a directory.")

        forbidden = CFG.renamer.forbidden_characters
        if not self._new_name or any(c in forbidden for c in self._new_name):
            raise DZipError(
                f"Invalid new name '{self._new_name}': the name must not be empty or contain any of '{forbidden}'."
            )

        if self.renamed.exists() or self.renamed.is_symlink():
            raise DZipError(f"'{self.renamed}' already exists.")

    def rename(self) -> Path:
        """
        Rename the directory to the new name.

        Returns:
            Path: Absolute path to the renamed directory.

        Raises:
            DZipRenameError: If the directory could not be renamed.
        """
        logger.debug(f"Renaming '{self.original}' to '{self.renamed}'.")
        try:
            os.rename(self.original, self.renamed)
        except OSError as e:
            raise DZipRenameError(
                f"Could not rename '{self.original}' to '{self.renamed}': {e}."
            ) from e

        return self.renamed

    def restore(self) -> bool:
        """
        Rename the directory back to its original name.

        Failure is not fatal: a warning asking the user to restore the name manually is logged.

        Returns:
            bool: True if the original name was restored, otherwise False.
        """
        logger.debug(f"Restoring '{self.renamed}' to '{self.original}'.")
        try:
            os.rename(self.renamed, self.original)
        except OSError as e:
            logger.warning(
                f"Could not restore the original name of the directory: {e}.\n"
                f"Please rename '{self.renamed}' back to '{self.original}' manually."
            )
            return False

        return True
