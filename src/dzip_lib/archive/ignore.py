# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Iterable, Iterator
from pathlib import Path


class IgnoreSet:
    """
    Collection of root-relative paths excluded from an archive.

    The paths are stored as provided and resolved only when matching,
    relative to the directory being scanned. Matching compares file identity,
    so differently spelled paths (symlinks, '..' components, hard links)
    naming the same file are considered equal.
    """

    def __init__(self, paths: Iterable[str | Path] = ()):
        """
        Initialize the IgnoreSet.

        Args:
            paths (Iterable[str | Path]): Paths relative to the scanned directory. Empty strings are dropped.
        """
        self._paths = {Path(p) for p in paths if str(p)}

    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __bool__(self) -> bool:
        return bool(self._paths)

    def __repr__(self) -> str:
        return f"IgnoreSet({sorted(str(p) for p in self._paths)})"

    def matches(self, root: Path, path: Path) -> bool:
        """
        Check whether `path` is one of the ignored paths.

        Args:
            root (Path): The directory the ignored paths are relative to.
            path (Path): Path of the visited entry.

        Returns:
            bool: True if `path` names the same file as any ignored path, otherwise False.
        """
        return any(
            IgnoreSet._isSameFile(path, (root / ignored).resolve())
            for ignored in self._paths
        )

    @staticmethod
    def _isSameFile(path: Path, other: Path) -> bool:
        """Check whether the two paths point to the same existing file."""
        try:
            return path.samefile(other)
        except OSError:
            # at least one of the paths does not exist or is inaccessible
            return False
