#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Publish command for the pregyp-github CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr

from pregyp.config.defaults import MANIFEST_FILE
from pregyp.console import get_command_logger, make_status_reporter
from pregyp.exceptions import PregypException
from pregyp.publisher import PublishOptions, publish
from pregyp.staging import default_stage_root

# Get structured logger for this command
log = get_command_logger("publish")


@click.command("publish")
@click.option(
    "--release",
    "-r",
    is_flag=True,
    help="Publish a newly created release once every file is uploaded instead of leaving a draft.",
)
@click.option(
    "--silent",
    "-s",
    is_flag=True,
    help="Turn status messages off. Errors are always shown.",
)
@click.option(
    "--manifest",
    "manifest_path",
    default=MANIFEST_FILE,
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Path to package.json.",
)
@click.option(
    "--stage-root",
    default=None,
    type=click.Path(file_okay=False, resolve_path=True),
    help="Directory the build step stages binaries into (default: ./build/stage).",
)
def publish_command(release: bool, silent: bool, manifest_path: str, stage_root: str | None) -> None:
    """Publishes the contents of build/stage/{version} to the matching GitHub release."""
    options = PublishOptions(
        manifest_path=Path(manifest_path),
        stage_root=Path(stage_root) if stage_root else default_stage_root(),
        draft=not release,
    )
    log.debug(
        "Publish command started",
        manifest=str(options.manifest_path),
        stage_root=str(options.stage_root),
        draft=options.draft,
    )

    try:
        result = publish(options, update_status=make_status_reporter(silent))
    except PregypException as e:
        log.error("Publish failed", error=str(e))
        perr(f"❌ An error occurred whilst publishing: {e}")
        raise click.Abort() from e

    log.info(
        "Publish command finished",
        tag=result.release.tag_name,
        created=result.created,
        uploaded=list(result.uploaded),
    )


# 📦🚀🔚
