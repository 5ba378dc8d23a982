# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
import shutil
import stat
import zipfile
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from dzip_lib.core.config import CFG
from dzip_lib.core.logger import get_logger

from .extra import ExtraFile
from .ignore import IgnoreSet

logger = get_logger(__name__)

# value of ZipInfo.create_system for entries created on Unix
_UNIX_SYSTEM = 3
# MS-DOS attribute marking a directory
_MSDOS_DIRECTORY_FLAG = 0x10


class Archiver:
    """
    Compresses a directory tree into a ZIP archive.

    Every regular file and directory below the root is added to the archive,
    except for paths in the ignore set (ignored directories are skipped
    together with their content). Extra files are appended at the top level
    of the archive after the directory has been processed.
    """

    def __init__(
        self,
        zip_path: Path,
        root: Path,
        ignore_set: IgnoreSet | None = None,
        windows_style: bool = False,
        extra_files: Iterable[ExtraFile] = (),
        on_progress: Callable[[int], None] | None = None,
    ):
        """
        Initialize the Archiver.

        Args:
            zip_path (Path): Path to the archive to create. Overwritten if it exists.
            root (Path): The directory to compress.
            ignore_set (IgnoreSet | None): Paths relative to `root` to exclude. Defaults to excluding nothing.
            windows_style (bool): Whether to nest all entries of `root` in a folder named after `root`.
            extra_files (Iterable[ExtraFile]): Additional files to add to the archive.
            on_progress (Callable[[int], None] | None): Called with the percentage of processed files.
        """
        self._zip_path = zip_path
        self._root = root
        self._ignore_set = ignore_set or IgnoreSet()
        self._wrapper_folder = f"{root.name}/" if windows_style else ""
        self._extra_files = list(extra_files)
        self._on_progress = on_progress

        self._processed = 0
        self._total = 0
        self._created = False

    def compress(self) -> int:
        """
        Create the archive.

        The directory is walked twice: first to count the files to compress,
        then to write them. Directories are stored as empty entries so that
        empty directories are preserved.

        Returns:
            int: The number of files written into the archive (directory entries are not counted).
                Zero if the archive could not be opened for writing.
        """
        logger.debug(
            f"Compressing '{self._root}' into '{self._zip_path}' (ignored: {self._ignore_set}, wrapper folder: '{self._wrapper_folder}')."
        )

        try:
            archive = zipfile.ZipFile(
                self._zip_path,
                "w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=CFG.archiver.compression_level,
            )
        except OSError as e:
            logger.error(f"Could not open archive '{self._zip_path}' for writing: {e}.")
            return 0

        self._created = True
        self._processed = 0
        with archive:
            self._total = self._countFiles()
            logger.debug(f"Number of files to compress: {self._total}.")

            for path, is_dir in self._walk(report_ignored=True):
                entry_name = self._wrapper_folder + self._relative(path)
                if is_dir:
                    self._writeDirectory(archive, path, entry_name)
                elif self._isDestination(path):
                    logger.warning(
                        f"Skipping '{self._relative(path)}': this is the archive being created."
                    )
                elif self._writeFile(archive, path, entry_name):
                    self._advance()

            for extra in self._extra_files:
                if not extra.isValid():
                    logger.debug(
                        f"Extra file '{extra.source}' does not exist or is not a regular file. Skipping."
                    )
                    continue

                if self._isDestination(extra.source):
                    logger.warning(
                        f"Skipping extra file '{extra.source}': this is the archive being created."
                    )
                    continue

                if not Archiver._isEncodable(extra.entry_name):
                    logger.warning(
                        f"Skipping extra file '{_printable(extra.entry_name)}': name is not valid UTF-8."
                    )
                    continue

                if self._writeFile(archive, extra.source, extra.entry_name):
                    self._advance()

        return self._processed

    def _walk(self, report_ignored: bool = False) -> Iterator[tuple[Path, bool]]:
        """
        Traverse the root directory, skipping ignored paths.

        Symbolic links to directories are followed. Directories that cannot be
        read are silently skipped.

        Args:
            report_ignored (bool): Whether to log the ignored paths.

        Yields:
            tuple[Path, bool]: Path to a directory or a regular file and whether it is a directory.
        """
        for dirpath, dirnames, filenames in os.walk(self._root, followlinks=True):
            directory = Path(dirpath)

            kept = []
            for name in sorted(dirnames):
                path = directory / name
                if self._ignore_set.matches(self._root, path):
                    if report_ignored:
                        logger.info(f"Ignoring directory '{self._relative(path)}'.")
                    continue
                if not Archiver._isEncodable(self._relative(path)):
                    if report_ignored:
                        logger.warning(
                            f"Skipping directory '{_printable(self._relative(path))}': name is not valid UTF-8."
                        )
                    continue
                kept.append(name)

            # do not descend into ignored directories
            dirnames[:] = kept
            for name in kept:
                yield directory / name, True

            for name in sorted(filenames):
                path = directory / name
                if self._ignore_set.matches(self._root, path):
                    if report_ignored:
                        logger.info(f"Ignoring '{self._relative(path)}'.")
                    continue

                # skips sockets, FIFOs and broken symlinks
                if not path.is_file():
                    continue

                if not Archiver._isEncodable(self._relative(path)):
                    if report_ignored:
                        logger.warning(
                            f"Skipping '{_printable(self._relative(path))}': name is not valid UTF-8."
                        )
                    continue

                yield path, False

    def _countFiles(self) -> int:
        """Count the files that will be written into the archive."""
        total = sum(
            1
            for path, is_dir in self._walk()
            if not is_dir
            and not self._isDestination(path)
            and os.access(path, os.R_OK)
        )
        total += sum(
            1
            for extra in self._extra_files
            if extra.isValid()
            and not self._isDestination(extra.source)
            and Archiver._isEncodable(extra.entry_name)
            and os.access(extra.source, os.R_OK)
        )
        return total

    def _writeFile(self, archive: zipfile.ZipFile, path: Path, entry_name: str) -> bool:
        """
        Stream the content of a file into a new archive entry.

        Args:
            archive (zipfile.ZipFile): The archive open for writing.
            path (Path): Path to the file.
            entry_name (str): Name of the entry inside the archive.

        Returns:
            bool: True if the file was written, False if it could not be read.
        """
        try:
            source = path.open("rb")
        except OSError as e:
            logger.warning(f"Could not read '{path}': {e}. Skipping.")
            return False

        with source:
            info = zipfile.ZipInfo.from_file(path, entry_name, strict_timestamps=False)
            # same as ZipFile.write
            info.compress_type = archive.compression
            if "compress_level" in zipfile.ZipInfo.__slots__:
                info.compress_level = archive.compresslevel
            else:
                # Python < 3.13
                info._compresslevel = archive.compresslevel
            Archiver._stampPermissions(info)

            with archive.open(info, "w") as entry:
                shutil.copyfileobj(source, entry, CFG.archiver.chunk_size)

        return True

    @staticmethod
    def _writeDirectory(archive: zipfile.ZipFile, path: Path, entry_name: str) -> None:
        """Write an empty entry for a directory. A trailing '/' is added to the entry name."""
        info = zipfile.ZipInfo.from_file(path, entry_name, strict_timestamps=False)
        # ZipFile.mkdir only initializes these for entries it creates itself
        info.CRC = 0
        info.compress_size = 0
        Archiver._stampPermissions(info)
        archive.mkdir(info)

    @staticmethod
    def _stampPermissions(info: zipfile.ZipInfo) -> None:
        """
        Set Unix permissions of an entry that would be stored without them.

        Entries created on non-Unix systems (i.e., on Windows) carry no Unix
        permission bits, so extracting them on Unix yields unusable permissions.
        Such entries are marked as created on Unix with the configured permissions.
        Entries created on Unix are left unchanged.
        """
        if info.create_system == _UNIX_SYSTEM:
            return

        file_type = stat.S_IFDIR if info.is_dir() else stat.S_IFREG
        info.external_attr = (file_type | CFG.archiver.unix_permissions) << 16
        if info.is_dir():
            info.external_attr |= _MSDOS_DIRECTORY_FLAG
        info.create_system = _UNIX_SYSTEM

    def _advance(self) -> None:
        """Count a written file and report progress if due."""
        self._processed += 1

        if self._total <= 0:
            return

        if (
            self._processed % CFG.archiver.progress_interval == 0
            or self._processed == self._total
        ):
            percent = self._processed * 100 // self._total
            logger.debug(f"Processed {self._processed}/{self._total} files ({percent}%).")
            if self._on_progress:
                self._on_progress(percent)

    def _isDestination(self, path: Path) -> bool:
        """Check whether the path points to the archive being created."""
        try:
            return path.samefile(self._zip_path)
        except OSError:
            return False

    @staticmethod
    def _isEncodable(entry_name: str) -> bool:
        """Check whether the entry name can be stored in the archive."""
        # undecodable bytes in file names are turned into lone surrogates by os.walk
        try:
            entry_name.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    def _relative(self, path: Path) -> str:
        """Get the path relative to the root directory, with forward slashes."""
        return path.relative_to(self._root).as_posix()

    def wasCreated(self) -> bool:
        """Check whether the archive was successfully opened for writing by `compress`."""
        return self._created


def _printable(name: str) -> str:
    """Escape characters that cannot be printed, e.g. undecodable bytes in file names."""
    return name.encode("utf-8", "backslashreplace").decode("utf-8")
