#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for pregyp-github tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import json
from pathlib import Path
from typing import Any

from attrs import evolve
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest
import requests

from pregyp.models import Asset, Release

TOKEN = "secret"

DEFAULT_PACKAGE_JSON: dict[str, Any] = {
    "name": "test",
    "version": "0.0.1",
    "repository": {"url": "git+https://github.com/test/test.git"},
    "binary": {
        "host": "https://github.com/test/test/releases/download/",
        "remote_path": "{version}",
    },
}


class FakeReleaseClient:
    """In-memory stand-in for GitHubReleaseClient that records every call."""

    def __init__(self, releases: list[Release] | None = None) -> None:
        self.releases = list(releases or [])
        self.calls: list[str] = []
        self.created: list[dict[str, Any]] = []
        self.updated: list[dict[str, Any]] = []
        self.uploads: list[dict[str, Any]] = []
        self.closed = False

    def find_release(self, owner: str, repo: str, tag: str) -> Release | None:
        self.calls.append("find_release")
        for release in self.releases:
            if release.tag_name == tag:
                return release
        return None

    def create_release(self, owner: str, repo: str, **kwargs: Any) -> Release:
        self.calls.append("create_release")
        self.created.append({"owner": owner, "repo": repo, **kwargs})
        release = Release(id=100 + len(self.created), tag_name=kwargs["tag"], draft=kwargs["draft"])
        self.releases.append(release)
        return release

    def update_release(self, owner: str, repo: str, release: Release, **fields: Any) -> Release:
        self.calls.append("update_release")
        self.updated.append({"release_id": release.id, **fields})
        updated = evolve(release, **fields)
        self.releases = [updated if r.id == release.id else r for r in self.releases]
        return updated

    def upload_asset(
        self,
        owner: str,
        repo: str,
        release: Release,
        name: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> Asset:
        self.calls.append("upload_asset")
        self.uploads.append(
            {
                "owner": owner,
                "repo": repo,
                "release_id": release.id,
                "name": name,
                "data": data,
                "content_type": content_type,
            }
        )
        return Asset(name=name, id=len(self.uploads))

    def close(self) -> None:
        self.closed = True


def make_response(
    status_code: int = 200,
    payload: Any = None,
    link: str | None = None,
    text: str | None = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://api.github.com/test"
    if text is not None:
        response._content = text.encode()
    else:
        response._content = json.dumps(payload).encode()
    if link:
        response.headers["Link"] = link
    return response


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Write a package.json into ``tmp_path``, overriding top-level fields."""

    def _write(data: dict[str, Any] | None = None, **overrides: Any) -> Path:
        document = dict(DEFAULT_PACKAGE_JSON if data is None else data)
        document.update(overrides)
        path = tmp_path / "package.json"
        path.write_text(json.dumps(document))
        return path

    return _write


@pytest.fixture
def stage_root(tmp_path: Path) -> Path:
    root = tmp_path / "build" / "stage"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def stage_files(stage_root: Path) -> Callable[..., Path]:
    """Create staged files under ``stage_root[/subdir]``."""

    def _stage(*names: str, subdir: str | None = "0.0.1") -> Path:
        directory = stage_root / subdir if subdir else stage_root
        directory.mkdir(parents=True, exist_ok=True)
        for name in names:
            (directory / name).write_bytes(f"binary:{name}".encode())
        return directory

    return _stage


# 📦🚀🔚
