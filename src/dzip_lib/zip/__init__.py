# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The `dzip zip` command compressing a directory into an archive in the current directory.
"""
