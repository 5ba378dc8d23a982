# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Utilities for archiving a directory under a different name.

This module defines the `Renamer` class, which temporarily renames a directory
so that it can be compressed under the new name, and restores the original
name afterwards.
"""

from .renamer import Renamer

__all__ = [
    "Renamer",
]
