#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Release and asset values decoded from GitHub API payloads."""

from __future__ import annotations

from typing import Any

from attrs import field, frozen


@frozen
class Asset:
    """A single named file attached to a release."""

    name: str
    id: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Asset:
        return cls(name=data["name"], id=data.get("id"))


@frozen
class Release:
    """Snapshot of a GitHub release as returned by the API."""

    id: int
    tag_name: str
    draft: bool = False
    name: str | None = None
    upload_url: str = ""
    html_url: str | None = None
    assets: tuple[Asset, ...] = field(default=(), converter=tuple)

    @property
    def asset_names(self) -> frozenset[str]:
        return frozenset(asset.name for asset in self.assets)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Release:
        """Decode a release object.

        ``upload_url`` arrives as a URI template such as
        ``.../assets{?name,label}``; only the part before ``{`` is kept.
        """
        upload_url = data.get("upload_url") or ""
        return cls(
            id=data["id"],
            tag_name=data["tag_name"],
            draft=bool(data.get("draft", False)),
            name=data.get("name"),
            upload_url=upload_url.split("{", 1)[0],
            html_url=data.get("html_url"),
            assets=[Asset.from_api(asset) for asset in data.get("assets") or [] if asset.get("name")],
        )


# 📦🚀🔚
