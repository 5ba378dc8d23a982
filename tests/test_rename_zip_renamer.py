# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import patch

import pytest

from dzip_lib.core.error import DZipError, DZipRenameError
from dzip_lib.rename_zip.renamer import Renamer


@pytest.fixture
def directory(tmp_path):
    directory = tmp_path / "myfolder"
    directory.mkdir()
    (directory / "a.txt").write_text("alpha")
    return directory


def test_renamer_paths(directory):
    renamer = Renamer(directory, "renamed")

    assert renamer.original == directory.resolve()
    assert renamer.renamed == directory.resolve().parent / "renamed"


def test_ensure_valid_passes(directory):
    Renamer(directory, "renamed").ensureValid()


def test_ensure_valid_missing_directory(tmp_path):
    with pytest.raises(DZipError, match="does not exist"):
        Renamer(tmp_path / "missing", "renamed").ensureValid()


def test_ensure_valid_not_a_directory(directory):
    with pytest.raises(DZipError, match="is not a directory"):
        Renamer(directory / "a.txt", "renamed").ensureValid()


@pytest.mark.parametrize("new_name", ["", "a/b", "a\\b", "c:", "/abs"])
def test_ensure_valid_illegal_name(directory, new_name):
    with pytest.raises(DZipError, match="Invalid new name"):
        Renamer(directory, new_name).ensureValid()


def test_ensure_valid_collision(directory, tmp_path):
    (tmp_path / "renamed").mkdir()

    with pytest.raises(DZipError, match="already exists"):
        Renamer(directory, "renamed").ensureValid()


def test_ensure_valid_collision_with_file(directory, tmp_path):
    (tmp_path / "renamed").write_text("")

    with pytest.raises(DZipError, match="already exists"):
        Renamer(directory, "renamed").ensureValid()


def test_rename_and_restore(directory, tmp_path):
    renamer = Renamer(directory, "renamed")

    renamed = renamer.rename()

    assert renamed == tmp_path.resolve() / "renamed"
    assert (renamed / "a.txt").read_text() == "alpha"
    assert not directory.exists()

    assert renamer.restore()
    assert (directory / "a.txt").read_text() == "alpha"
    assert not renamed.exists()


@patch("dzip_lib.rename_zip.renamer.os.rename", side_effect=PermissionError("denied"))
def test_rename_failure_raises(mock_rename, directory):
    with pytest.raises(DZipRenameError, match="Could not rename"):
        Renamer(directory, "renamed").rename()

    mock_rename.assert_called_once()


def test_rename_error_is_dzip_error():
    assert issubclass(DZipRenameError, DZipError)


@patch("dzip_lib.rename_zip.renamer.logger.warning")
def test_restore_failure_warns(mock_warning, directory, tmp_path):
    renamer = Renamer(directory, "renamed")
    renamer.rename()

    with patch(
        "dzip_lib.rename_zip.renamer.os.rename", side_effect=OSError("busy")
    ):
        assert not renamer.restore()

    mock_warning.assert_called_once()
    assert "manually" in mock_warning.call_args.args[0]
    assert (tmp_path / "renamed").exists()
