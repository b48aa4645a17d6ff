#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Publish staged binaries to a GitHub release.

The protocol is strictly sequential and stops at the first failure:

1. read package.json and resolve the release target (no network)
2. require a token
3. look the release up by tag, creating it when absent
4. list the staging directory, reject any name already on the release
5. upload each staged file in name order
6. publish a release created here unless a draft was requested

Existing assets are never replaced. A release found on GitHub keeps its
draft flag. A release created here always starts as a draft and, unless a
draft was requested, is published only after every upload has succeeded.
"""

from __future__ import annotations

from pathlib import Path

from attrs import field, frozen
from provide.foundation import logger

from pregyp.config.defaults import DEFAULT_DRAFT, DEFAULT_TARGET_COMMITISH, MANIFEST_FILE, TOKEN_ENV_VAR
from pregyp.config.runtime import PregypRuntimeConfig
from pregyp.console import StatusCallback, log_status
from pregyp.exceptions import AuthError, FilesystemError
from pregyp.github.client import GitHubReleaseClient
from pregyp.manifest import ProjectManifest, load_manifest
from pregyp.models import Release
from pregyp.staging import (
    check_no_duplicates,
    default_stage_root,
    guess_content_type,
    list_staged_files,
    stage_directory,
)
from pregyp.target import ReleaseTarget, resolve


def _default_manifest_path() -> Path:
    return Path.cwd() / MANIFEST_FILE


@frozen
class PublishOptions:
    """Inputs of a single publish run.

    Attributes:
        manifest_path: package.json to read
        stage_root: directory the build step stages binaries into
        draft: whether a newly created release is left as a draft
        token: GitHub token; read from the environment when ``None``
        target_commitish: commitish a newly created tag points at
    """

    manifest_path: Path = field(factory=_default_manifest_path, converter=Path)
    stage_root: Path = field(factory=default_stage_root, converter=Path)
    draft: bool = DEFAULT_DRAFT
    token: str | None = field(default=None, repr=False)
    target_commitish: str = DEFAULT_TARGET_COMMITISH


@frozen
class PublishResult:
    """Outcome of a successful publish."""

    target: ReleaseTarget
    release: Release
    created: bool
    stage_dir: Path
    uploaded: tuple[str, ...] = field(converter=tuple)


def resolve_token(options: PublishOptions) -> str:
    """Return the token from ``options`` or the environment.

    Raises:
        AuthError: If neither provides a non-empty token
    """
    token = options.token if options.token is not None else PregypRuntimeConfig.from_env().github_token
    if not token:
        raise AuthError(f"{TOKEN_ENV_VAR} environment variable not found")
    return token


def publish(
    options: PublishOptions | None = None,
    update_status: StatusCallback | None = None,
    client: GitHubReleaseClient | None = None,
) -> PublishResult:
    """Publish the staged binaries described by ``options``.

    Args:
        options: Publish inputs, defaults resolved against the working directory
        update_status: Receives human-readable progress lines
        client: API client to use; one is built for the target host when omitted

    Returns:
        PublishResult describing the release and the uploaded asset names

    Raises:
        ConfigError: If package.json is missing or inconsistent
        AuthError: If no token is available
        FilesystemError: If the staging directory is unreadable or empty
        DuplicateAssetError: If a staged file already exists on the release
        RemoteServiceError: If any GitHub API call fails
    """
    options = options or PublishOptions()
    report = update_status or log_status

    manifest = load_manifest(options.manifest_path)
    target = resolve(manifest)
    token = resolve_token(options)

    logger.info("Publishing staged binaries", target=str(target), draft=options.draft)

    owns_client = client is None
    if client is None:
        client = GitHubReleaseClient(
            target.api_base_url,
            token,
            user_agent=manifest.name,
            upload_base_url=target.upload_base_url,
        )

    try:
        release, created = _locate_or_create_release(client, manifest, target, options, report)
        stage_dir = stage_directory(options.stage_root, target)
        uploaded = _upload_assets(client, target, release, stage_dir, report)
        if created and release.draft and not options.draft:
            release = client.update_release(target.owner, target.repo, release, draft=False)
            logger.info("Published release", tag=release.tag_name, id=release.id, draft=release.draft)
    finally:
        if owns_client:
            client.close()

    _report_outcome(target, release, created, uploaded, report)
    return PublishResult(
        target=target, release=release, created=created, stage_dir=stage_dir, uploaded=uploaded
    )


def _locate_or_create_release(
    client: GitHubReleaseClient,
    manifest: ProjectManifest,
    target: ReleaseTarget,
    options: PublishOptions,
    report: StatusCallback,
) -> tuple[Release, bool]:
    release = client.find_release(target.owner, target.repo, target.tag)
    if release is not None:
        logger.debug("Found existing release", tag=release.tag_name, id=release.id, draft=release.draft)
        report(f"Release {release.tag_name} found on {target.slug}")
        return release, False

    release = client.create_release(
        target.owner,
        target.repo,
        tag=target.tag,
        name=f"v{target.version}",
        body=f"{manifest.name} {target.version}" if manifest.name else target.version,
        draft=True,
        target_commitish=options.target_commitish,
    )
    logger.info("Created release", tag=release.tag_name, id=release.id, draft=release.draft)
    if options.draft:
        report(
            f"Release {release.tag_name} not found, so a draft release was created. "
            "YOU MUST MANUALLY PUBLISH THIS DRAFT WITHIN GITHUB FOR IT TO BE ACCESSIBLE."
        )
    else:
        report(
            f"Release {release.tag_name} not found, so a draft release was created. "
            "It will be published once every staged file is uploaded."
        )
    return release, True


def _upload_assets(
    client: GitHubReleaseClient,
    target: ReleaseTarget,
    release: Release,
    stage_dir: Path,
    report: StatusCallback,
) -> tuple[str, ...]:
    report(f"Stage directory path: {stage_dir}")
    files = list_staged_files(stage_dir)

    # checked against one snapshot before the first upload so a collision
    # never leaves a partially published release behind
    check_no_duplicates(files, release.asset_names, release.tag_name)

    uploaded = []
    for path in files:
        report(f"Staged file {path.name} found - proceeding to upload")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FilesystemError(f"Unable to read staged file {path}: {e}", path=path) from e

        client.upload_asset(
            target.owner,
            target.repo,
            release,
            path.name,
            data,
            content_type=guess_content_type(path.name),
        )
        uploaded.append(path.name)
        report(
            f"Staged file {path.name} saved to {target.slug} release {release.tag_name} successfully."
        )
    return tuple(uploaded)


def _report_outcome(
    target: ReleaseTarget,
    release: Release,
    created: bool,
    uploaded: tuple[str, ...],
    report: StatusCallback,
) -> None:
    logger.info("Publish complete", target=str(target), uploaded=len(uploaded), created=created)
    if not created:
        report(f"{len(uploaded)} asset(s) added to {target.slug}@{release.tag_name}.")
    elif release.draft:
        report(
            f"{target.slug}@{release.tag_name} was just published as a draft. "
            "In order to make it accessible, manually publish it within GitHub."
        )
    else:
        report(f"{target.slug}@{release.tag_name} was just published.")


# 📦🚀🔚
