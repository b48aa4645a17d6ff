#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Minimal GitHub releases REST client."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from provide.foundation import logger
import requests

from pregyp.config.defaults import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_PRERELEASE,
    DEFAULT_TARGET_COMMITISH,
    DEFAULT_USER_AGENT,
    GITHUB_ACCEPT,
    GITHUB_API_VERSION,
    RELEASES_PER_PAGE,
)
from pregyp.exceptions import RemoteServiceError
from pregyp.models import Asset, Release

T = TypeVar("T")


class GitHubReleaseClient:
    """Talks to the releases endpoints of one GitHub (Enterprise) host.

    Every failure is raised as :class:`RemoteServiceError`: transport errors,
    non-2xx responses (with the service message untouched) and 2xx bodies
    that are not the JSON shape the endpoint documents. No request is ever
    retried.
    """

    def __init__(
        self,
        api_base_url: str,
        token: str,
        user_agent: str | None = None,
        upload_base_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_base_url = api_base_url.rstrip("/")
        self.upload_base_url = (upload_base_url or self.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": GITHUB_ACCEPT,
                "Authorization": f"Bearer {token}",
                "User-Agent": user_agent or DEFAULT_USER_AGENT,
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            }
        )

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("GitHub API request", method=method, url=url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise RemoteServiceError(f"{method} {url} failed: {e}") from e

        logger.debug("GitHub API response", method=method, url=url, status=response.status_code)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RemoteServiceError(
                f"{method} {url} returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            ) from e
        return response

    def _json(self, method: str, url: str, response: requests.Response, expected: type) -> Any:
        """Decode a 2xx body, which must be a JSON ``expected`` (``list`` or ``dict``)."""
        try:
            body = response.json()
        except ValueError as e:
            raise RemoteServiceError(
                f"{method} {url} returned {response.status_code} with a body that is not JSON: "
                f"{response.text[:200]}",
                status_code=response.status_code,
            ) from e
        if not isinstance(body, expected):
            raise RemoteServiceError(
                f"{method} {url} returned {response.status_code} with an unexpected JSON "
                f"{type(body).__name__}: {response.text[:200]}",
                status_code=response.status_code,
            )
        return body

    def _decode(
        self, method: str, url: str, response: requests.Response, decoder: Callable[[Any], T], payload: Any
    ) -> T:
        try:
            return decoder(payload)
        except (KeyError, TypeError, AttributeError) as e:
            raise RemoteServiceError(
                f"{method} {url} returned {response.status_code} with a malformed payload: {e!r}",
                status_code=response.status_code,
            ) from e

    def list_releases(self, owner: str, repo: str) -> list[Release]:
        """Return every release of ``owner/repo``, following pagination."""
        url: str | None = f"{self.api_base_url}/repos/{owner}/{repo}/releases"
        params: dict[str, Any] | None = {"per_page": RELEASES_PER_PAGE}
        releases: list[Release] = []
        while url:
            response = self._request("GET", url, params=params)
            for item in self._json("GET", url, response, list):
                releases.append(self._decode("GET", url, response, Release.from_api, item))
            url = response.links.get("next", {}).get("url")
            # the next link already carries the query string
            params = None
        return releases

    def find_release(self, owner: str, repo: str, tag: str) -> Release | None:
        """Return the release tagged ``tag``, or ``None`` when there is none."""
        for release in self.list_releases(owner, repo):
            if release.tag_name == tag:
                return release
        return None

    def create_release(
        self,
        owner: str,
        repo: str,
        tag: str,
        name: str,
        body: str,
        draft: bool,
        target_commitish: str = DEFAULT_TARGET_COMMITISH,
        prerelease: bool = DEFAULT_PRERELEASE,
    ) -> Release:
        payload = {
            "tag_name": tag,
            "target_commitish": target_commitish,
            "name": name,
            "body": body,
            "draft": draft,
            "prerelease": prerelease,
        }
        url = f"{self.api_base_url}/repos/{owner}/{repo}/releases"
        response = self._request("POST", url, json=payload)
        return self._decode("POST", url, response, Release.from_api, self._json("POST", url, response, dict))

    def update_release(self, owner: str, repo: str, release: Release, **fields: Any) -> Release:
        """Edit ``release`` in place, e.g. ``draft=False`` to publish a draft."""
        url = f"{self.api_base_url}/repos/{owner}/{repo}/releases/{release.id}"
        response = self._request("PATCH", url, json=fields)
        return self._decode("PATCH", url, response, Release.from_api, self._json("PATCH", url, response, dict))

    def upload_asset(
        self,
        owner: str,
        repo: str,
        release: Release,
        name: str,
        data: bytes,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> Asset:
        """Upload ``data`` as an asset called ``name`` on ``release``."""
        default_url = f"{self.upload_base_url}/repos/{owner}/{repo}/releases/{release.id}/assets"
        base = release.upload_url or default_url
        response = self._request(
            "POST",
            base,
            params={"name": name},
            data=data,
            headers={"Content-Type": content_type},
        )
        return self._decode("POST", base, response, Asset.from_api, self._json("POST", base, response, dict))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> GitHubReleaseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _error_message(response: requests.Response) -> str:
    """Pull GitHub's ``message`` field out of an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return response.text


# 📦🚀🔚
