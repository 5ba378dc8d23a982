# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Utilities for compressing a directory into a ZIP archive.

This module provides the `Archiver` class, which walks a directory tree and
streams its content into an archive, the `IgnoreSet` of paths excluded from
the archive, the `ExtraFile` description of files added independently of the
directory walk and a `ProgressBar` displaying the progress of compression.
The `compress_directory` function ties them together for the dzip commands.
"""

from .archiver import Archiver
from .compress import compress_directory
from .extra import ExtraFile
from .ignore import IgnoreSet
from .progress import ProgressBar

__all__ = [
    "Archiver",
    "ExtraFile",
    "IgnoreSet",
    "ProgressBar",
    "compress_directory",
]
