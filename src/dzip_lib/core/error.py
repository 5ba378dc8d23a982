# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout dzip.

Each exception carries an associated exit code used by dzip commands to
report failures consistently.
"""

from .config import CFG


class DZipError(Exception):
    """Common exception type for all recoverable dzip errors."""

    exit_code = CFG.exit_codes.default


class DZipRenameError(DZipError):
    """Raised when a directory cannot be renamed before archiving."""

    pass
