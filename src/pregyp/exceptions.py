#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for pregyp-github."""

from __future__ import annotations

from pathlib import Path

from provide.foundation.errors import FoundationError


class PregypException(FoundationError):
    """Base exception for all pregyp-related errors."""

    pass


class ConfigError(PregypException):
    """Raised when package.json is missing or carries inconsistent fields."""

    pass


class AuthError(PregypException):
    """Raised when no GitHub token is available."""

    pass


class FilesystemError(PregypException):
    """Raised when the staging directory cannot be read."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class EmptyStageError(FilesystemError):
    """Raised when the staging directory holds no files."""

    pass


class DuplicateAssetError(PregypException):
    """Raised when a staged file already exists as an asset on the release."""

    def __init__(self, filename: str, tag: str) -> None:
        super().__init__(
            f"Staged file {filename} found but it already exists in release {tag}. "
            "If you would like to replace it, you must first manually delete it within GitHub."
        )
        self.filename = filename
        self.tag = tag


class RemoteServiceError(PregypException):
    """Raised for any failure reported by the GitHub API.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# 📦🚀🔚
