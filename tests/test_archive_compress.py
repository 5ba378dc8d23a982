# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import zipfile
from unittest.mock import patch

import pytest

from dzip_lib.archive.compress import compress_directory
from dzip_lib.archive.ignore import IgnoreSet
from dzip_lib.core.error import DZipError


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.txt").write_text("beta")
    return root


@patch("dzip_lib.archive.compress.logger.info")
def test_compress_directory_logs_summary(mock_logger_info, root, tmp_path):
    zip_path = tmp_path / "out.zip"

    processed = compress_directory(zip_path, root, IgnoreSet(["b.txt"]))

    assert processed == 1
    with zipfile.ZipFile(zip_path) as archive:
        assert archive.namelist() == ["a.txt"]
    mock_logger_info.assert_called_once_with(
        f"Compression finished: processed 1 files, archive written to '{zip_path}'."
    )


def test_compress_directory_windows_style(root, tmp_path):
    zip_path = tmp_path / "out.zip"

    compress_directory(zip_path, root, windows_style=True)

    with zipfile.ZipFile(zip_path) as archive:
        assert sorted(archive.namelist()) == ["project/a.txt", "project/b.txt"]


def test_compress_directory_raises_if_archive_not_created(root, tmp_path):
    zip_path = tmp_path / "missing_dir" / "out.zip"

    with pytest.raises(DZipError, match="could not be created"):
        compress_directory(zip_path, root)
