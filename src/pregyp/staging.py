#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Locating and listing the binaries a build step left in build/stage."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from provide.foundation import logger

from pregyp.config.defaults import BUILD_DIR, DEFAULT_CONTENT_TYPE, STAGE_DIR
from pregyp.exceptions import DuplicateAssetError, EmptyStageError, FilesystemError
from pregyp.target import ReleaseTarget


def default_stage_root(cwd: Path | None = None) -> Path:
    """Return ``<cwd>/build/stage``."""
    return (cwd or Path.cwd()) / BUILD_DIR / STAGE_DIR


def stage_directory(stage_root: Path, target: ReleaseTarget) -> Path:
    """Return the directory holding the binaries for ``target``.

    Binaries live under a per-tag subdirectory only when the tag came from
    ``binary.remote_path``.
    """
    if target.tag_from_remote_path:
        return stage_root / target.tag
    return stage_root


def list_staged_files(stage_dir: Path) -> list[Path]:
    """List the files to upload, sorted by name.

    Raises:
        FilesystemError: If ``stage_dir`` cannot be listed
        EmptyStageError: If ``stage_dir`` holds no regular files
    """
    try:
        entries = sorted(stage_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FilesystemError(f"Unable to read stage directory {stage_dir}: {e}", path=stage_dir) from e

    files = []
    for entry in entries:
        if entry.is_file():
            files.append(entry)
        else:
            logger.debug("Skipping non-file stage entry", path=str(entry))

    if not files:
        raise EmptyStageError(f"No files found within the stage directory: {stage_dir}", path=stage_dir)
    return files


def check_no_duplicates(files: list[Path], existing_names: frozenset[str], tag: str) -> None:
    """Fail on the first staged file whose name is already a release asset."""
    for path in files:
        if path.name in existing_names:
            raise DuplicateAssetError(path.name, tag)


def guess_content_type(filename: str) -> str:
    """Guess a MIME type from the file name, defaulting to octet-stream."""
    content_type, encoding = mimetypes.guess_type(filename)
    if encoding == "gzip":
        return "application/gzip"
    if encoding is not None:
        return DEFAULT_CONTENT_TYPE
    return content_type or DEFAULT_CONTENT_TYPE


# 📦🚀🔚
