#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pregyp-github command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from pregyp.commands.publish import publish_command
from pregyp.config import PregypRuntimeConfig

__version__ = get_version("pregyp-github", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="pregyp-github",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Publish node-pre-gyp binaries to GitHub releases.

    Requires NODE_PRE_GYP_GITHUB_TOKEN to hold a token allowed to create
    releases and upload assets.

    Configure logging via environment variables:
    - PREGYP_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - PREGYP_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = PregypRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="pregyp-github",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(publish_command, name="publish")

main = cli

if __name__ == "__main__":
    cli()

# 📦🚀🔚
