# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the dzip command-line tool.

This package provides the internal logic behind dzip: walking a directory
tree, excluding ignored paths, streaming the remaining files into a ZIP
archive and reporting progress, as well as the rename-archive-restore
workflow. All dzip CLI commands ultimately delegate to the functionality
implemented here.
"""

from .dzip import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "archive",
    "core",
    "rename_zip",
    "zip",
]
