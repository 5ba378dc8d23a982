# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
import sys
from pathlib import Path

import pytest

from dzip_lib.archive.ignore import IgnoreSet


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    return root


def test_ignore_set_drops_empty_paths():
    ignore_set = IgnoreSet(["", "a.txt", Path("sub")])

    assert len(ignore_set) == 2
    assert list(ignore_set) == [Path("a.txt"), Path("sub")]


def test_ignore_set_empty_is_falsy():
    assert not IgnoreSet()
    assert not IgnoreSet([""])
    assert IgnoreSet(["a.txt"])


def test_ignore_set_matches_file(root):
    ignore_set = IgnoreSet(["sub/b.txt"])

    assert ignore_set.matches(root, root / "sub" / "b.txt")
    assert not ignore_set.matches(root, root / "a.txt")
    assert not ignore_set.matches(root, root / "sub")


def test_ignore_set_matches_directory(root):
    ignore_set = IgnoreSet(["sub"])

    assert ignore_set.matches(root, root / "sub")
    # descendants are excluded by pruning the walk, not by matching
    assert not ignore_set.matches(root, root / "sub" / "b.txt")


def test_ignore_set_matches_differently_spelled_path(root):
    ignore_set = IgnoreSet(["sub/../a.txt", "./sub/"])

    assert ignore_set.matches(root, root / "a.txt")
    assert ignore_set.matches(root, root / "sub")


def test_ignore_set_nonexistent_path_never_matches(root):
    ignore_set = IgnoreSet(["missing.txt"])

    assert not ignore_set.matches(root, root / "a.txt")
    assert not ignore_set.matches(root, root / "missing.txt")


def test_ignore_set_resolves_relative_to_scanned_root(root, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "a.txt").write_text("other a")

    ignore_set = IgnoreSet(["a.txt"])

    assert ignore_set.matches(root, root / "a.txt")
    assert ignore_set.matches(other, other / "a.txt")
    assert not ignore_set.matches(other, root / "a.txt")


def test_ignore_set_matches_hard_link(root):
    os.link(root / "a.txt", root / "hard.txt")
    ignore_set = IgnoreSet(["a.txt"])

    assert ignore_set.matches(root, root / "hard.txt")


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks require privileges")
def test_ignore_set_matches_symlink_target(root):
    (root / "link.txt").symlink_to(root / "a.txt")
    ignore_set = IgnoreSet(["link.txt"])

    assert ignore_set.matches(root, root / "a.txt")
    assert ignore_set.matches(root, root / "link.txt")
