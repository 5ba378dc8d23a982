# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from dzip_lib.core.common import relative_entry_name, split_paths_list


@pytest.mark.parametrize(
    "values,expected",
    [
        (None, []),
        ((), []),
        ("", []),
        ("a.txt", ["a.txt"]),
        ("a.txt,b/c.txt", ["a.txt", "b/c.txt"]),
        (("a.txt", "b.txt,c.txt"), ["a.txt", "b.txt", "c.txt"]),
        (("a.txt,", ",b.txt", ""), ["a.txt", "b.txt"]),
        ("my file.txt,other file.txt", ["my file.txt", "other file.txt"]),
    ],
)
def test_split_paths_list(values, expected):
    assert split_paths_list(values) == expected


def test_relative_entry_name_inside_base(tmp_path):
    path = tmp_path / "docs" / "readme.md"
    assert relative_entry_name(path, tmp_path) == "docs/readme.md"


def test_relative_entry_name_outside_base_uses_file_name(tmp_path):
    base = tmp_path / "work"
    path = tmp_path / "elsewhere" / "notes.txt"
    assert relative_entry_name(path, base) == "notes.txt"


def test_relative_entry_name_of_base_itself_uses_name(tmp_path):
    assert relative_entry_name(tmp_path, tmp_path) == tmp_path.name


def test_relative_entry_name_file_starting_with_dots_is_not_escaping(tmp_path):
    path = tmp_path / "..hidden"
    assert relative_entry_name(path, tmp_path) == "..hidden"


@patch("dzip_lib.core.common.os.path.relpath", side_effect=ValueError("different drives"))
def test_relative_entry_name_relpath_failure_uses_file_name(mock_relpath, tmp_path):
    path = tmp_path / "data.csv"
    assert relative_entry_name(path, tmp_path) == "data.csv"
    mock_relpath.assert_called_once()
