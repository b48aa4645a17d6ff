#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console output and per-command loggers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from provide.foundation import get_logger, logger
from provide.foundation.console import pout

StatusCallback = Callable[[str], object]


def get_command_logger(command: str) -> Any:
    """Return a structured logger named after a CLI command."""
    return get_logger(f"pregyp.commands.{command}")


def make_status_reporter(silent: bool = False) -> StatusCallback:
    """Build the callback that prints publish progress.

    Status lines are always logged at debug level; ``silent`` only stops them
    from reaching stdout.
    """

    def report(status: str) -> None:
        logger.debug("Publish status", status=status)
        if not silent:
            pout(status)

    return report


def log_status(status: str) -> None:
    """Send a status line to the debug log only; the default when no reporter is given."""
    logger.debug("Publish status", status=status)


# 📦🚀🔚
