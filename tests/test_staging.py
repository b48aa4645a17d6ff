#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the staging directory helpers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pregyp.exceptions import DuplicateAssetError, EmptyStageError, FilesystemError
from pregyp.staging import (
    check_no_duplicates,
    default_stage_root,
    guess_content_type,
    list_staged_files,
    stage_directory,
)
from pregyp.target import ReleaseTarget


def make_target(tag_from_remote_path: bool) -> ReleaseTarget:
    return ReleaseTarget(
        host="github.com",
        owner="o",
        repo="r",
        tag="1.0.0",
        version="1.0.0",
        tag_from_remote_path=tag_from_remote_path,
    )


class TestStageDirectory:
    """Test staging directory computation."""

    def test_default_stage_root(self, tmp_path: Path) -> None:
        assert default_stage_root(tmp_path) == tmp_path / "build" / "stage"

    def test_tag_subdirectory_with_remote_path(self, tmp_path: Path) -> None:
        assert stage_directory(tmp_path, make_target(True)) == tmp_path / "1.0.0"

    def test_legacy_root_without_remote_path(self, tmp_path: Path) -> None:
        assert stage_directory(tmp_path, make_target(False)) == tmp_path


class TestListStagedFiles:
    """Test listing staged binaries."""

    def test_sorted_by_name(self, stage_files: Callable[..., Path]) -> None:
        directory = stage_files("b.tar.gz", "a.tar.gz", "c.node")

        assert [p.name for p in list_staged_files(directory)] == ["a.tar.gz", "b.tar.gz", "c.node"]

    def test_subdirectories_skipped(self, stage_files: Callable[..., Path]) -> None:
        directory = stage_files("a.tar.gz")
        (directory / "nested").mkdir()

        assert [p.name for p in list_staged_files(directory)] == ["a.tar.gz"]

    def test_empty_directory(self, stage_root: Path) -> None:
        with pytest.raises(EmptyStageError, match="No files found within the stage directory") as exc_info:
            list_staged_files(stage_root)

        assert exc_info.value.path == stage_root
        assert str(stage_root) in str(exc_info.value)

    def test_only_subdirectories_counts_as_empty(self, stage_root: Path) -> None:
        (stage_root / "0.0.1").mkdir()

        with pytest.raises(EmptyStageError):
            list_staged_files(stage_root)

    def test_missing_directory(self, tmp_path: Path) -> None:
        missing = tmp_path / "build" / "stage" / "9.9.9"

        with pytest.raises(FilesystemError, match="Unable to read stage directory") as exc_info:
            list_staged_files(missing)

        assert not isinstance(exc_info.value, EmptyStageError)


class TestDuplicateCheck:
    """Test the asset name uniqueness check."""

    def test_no_collision(self, tmp_path: Path) -> None:
        check_no_duplicates([tmp_path / "a.tar.gz"], frozenset({"b.tar.gz"}), "1.0.0")

    def test_first_collision_reported(self, tmp_path: Path) -> None:
        files = [tmp_path / "a.tar.gz", tmp_path / "b.tar.gz", tmp_path / "c.tar.gz"]

        with pytest.raises(DuplicateAssetError) as exc_info:
            check_no_duplicates(files, frozenset({"c.tar.gz", "b.tar.gz"}), "1.0.0")

        assert exc_info.value.filename == "b.tar.gz"
        assert exc_info.value.tag == "1.0.0"
        assert "b.tar.gz found but it already exists in release 1.0.0" in str(exc_info.value)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("addon-v1.0.0-linux-x64.tar.gz", "application/gzip"),
        ("addon.zip", "application/zip"),
        ("addon.node", "application/octet-stream"),
        ("LICENSE", "application/octet-stream"),
    ],
)
def test_guess_content_type(filename: str, expected: str) -> None:
    assert guess_content_type(filename) == expected


# 📦🚀🔚
