# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for dzip.

This module collects the foundational classes and helpers used across the
dzip codebase: configuration, error types, structured logging, help
formatting and small path utilities.
"""
