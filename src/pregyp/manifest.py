#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reading the fields of package.json that drive a publish."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file.formats import read_json

from pregyp.exceptions import ConfigError


@frozen
class ProjectManifest:
    """The subset of package.json consumed by the publisher.

    ``binary`` keeps whatever value the document holds so that the resolver
    can tell a missing section apart from a malformed one.
    """

    version: str | None = None
    name: str | None = None
    repository_url: str | None = None
    binary: Any = None

    @property
    def binary_host(self) -> str | None:
        if isinstance(self.binary, dict) and isinstance(self.binary.get("host"), str):
            return self.binary["host"]
        return None

    @property
    def remote_path(self) -> str | None:
        if isinstance(self.binary, dict):
            remote_path = self.binary.get("remote_path")
            if isinstance(remote_path, str) and remote_path:
                return remote_path
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectManifest:
        """Build a manifest from a decoded package.json document."""
        repository = data.get("repository")
        if isinstance(repository, dict):
            repository_url = repository.get("url")
        elif isinstance(repository, str):
            # npm accepts the URL directly as the repository value
            repository_url = repository
        else:
            repository_url = None

        version = data.get("version")
        name = data.get("name")
        return cls(
            version=str(version) if version is not None else None,
            name=str(name) if name else None,
            repository_url=repository_url if isinstance(repository_url, str) and repository_url else None,
            binary=data.get("binary"),
        )


def load_manifest(manifest_path: Path) -> ProjectManifest:
    """Read package.json from disk.

    Raises:
        ConfigError: If the file is missing, unparseable or not a JSON object
    """
    logger.debug("Reading manifest", path=str(manifest_path))

    if not manifest_path.is_file():
        raise ConfigError(f"Manifest not found: {manifest_path}")

    try:
        data = read_json(manifest_path)
    except Exception as e:
        raise ConfigError(f"Unable to read {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Manifest {manifest_path} must contain a JSON object")

    return ProjectManifest.from_dict(data)


# 📦🚀🔚
