#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Derive and validate the release target from package.json.

Everything here is pure: no network or filesystem access happens, so a
misconfigured manifest is rejected before the first API call.
"""

from __future__ import annotations

import re

from attrs import frozen
from provide.foundation import logger

from pregyp.config.defaults import MANIFEST_FILE, VERSION_PLACEHOLDER
from pregyp.exceptions import ConfigError
from pregyp.manifest import ProjectManifest

_REPOSITORY_URL = re.compile(
    r"https?://(?P<host>[^/\s]+)/(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)


@frozen
class ReleaseTarget:
    """Where and under which tag the staged binaries are published."""

    host: str
    owner: str
    repo: str
    tag: str
    version: str
    package_name: str | None = None
    tag_from_remote_path: bool = False

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def api_host(self) -> str:
        return f"api.{self.host}"

    @property
    def api_base_url(self) -> str:
        return f"https://{self.api_host}"

    @property
    def upload_base_url(self) -> str:
        return f"https://uploads.{self.host}"

    @property
    def download_prefix(self) -> str:
        return download_prefix(self.api_host, self.owner, self.repo)

    def __str__(self) -> str:
        return f"{self.slug}@{self.tag}"


def download_prefix(api_host: str, owner: str, repo: str) -> str:
    """Return the prefix every ``binary.host`` must start with once normalized."""
    return f"https://{api_host}/{owner}/{repo}/releases/download/"


def parse_repository_url(url: str) -> tuple[str, str, str]:
    """Split a repository URL into ``(host, owner, repo)``.

    Accepts ``git+https://`` style prefixes and an optional ``.git`` suffix.

    Raises:
        ConfigError: If no host/owner/repo triple can be found
    """
    match = _REPOSITORY_URL.search(url.strip())
    if not match:
        raise ConfigError(f"A correctly formatted GitHub repository.url was not found within {MANIFEST_FILE}")
    return match["host"], match["owner"], match["repo"]


def resolve_tag(version: str, remote_path: str | None) -> str:
    """Compute the release tag.

    Every ``{version}`` in ``remote_path`` is replaced by ``version``. Without
    a ``remote_path`` the tag is the bare version, as it was before
    ``binary.remote_path`` support existed.
    """
    if not remote_path:
        return version
    return remote_path.replace(VERSION_PLACEHOLDER, version)


def normalize_binary_host(binary_host: str) -> str:
    """Rewrite the first ``https://`` into ``https://api.`` for comparison."""
    return binary_host.replace("https://", "https://api.", 1)


def resolve(manifest: ProjectManifest) -> ReleaseTarget:
    """Validate ``manifest`` and derive its release target.

    Raises:
        ConfigError: If any consumed field is missing or inconsistent
    """
    if not manifest.repository_url:
        raise ConfigError(f"Missing repository.url in {MANIFEST_FILE}")

    host, owner, repo = parse_repository_url(manifest.repository_url)

    binary_host = manifest.binary_host
    if binary_host is None:
        raise ConfigError(f"Missing binary.host in {MANIFEST_FILE}")

    expected = download_prefix(f"api.{host}", owner, repo)
    if not normalize_binary_host(binary_host).startswith(expected):
        raise ConfigError(f'binary.host in {MANIFEST_FILE} should begin with: "{expected}"')

    if not manifest.version:
        raise ConfigError(f"Missing version in {MANIFEST_FILE}")

    remote_path = manifest.remote_path
    target = ReleaseTarget(
        host=host,
        owner=owner,
        repo=repo,
        tag=resolve_tag(manifest.version, remote_path),
        version=manifest.version,
        package_name=manifest.name,
        tag_from_remote_path=remote_path is not None,
    )
    logger.debug(
        "Resolved release target",
        host=host,
        owner=owner,
        repo=repo,
        tag=target.tag,
        tag_from_remote_path=target.tag_from_remote_path,
    )
    return target


# 📦🚀🔚
