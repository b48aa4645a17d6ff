#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pregyp-github runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from pregyp.config.defaults import LOG_LEVEL_ENV_VAR, SETUP_LOG_LEVEL_ENV_VAR, TOKEN_ENV_VAR

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


@define
class PregypRuntimeConfig(RuntimeConfig):
    """pregyp-github runtime configuration read from the environment."""

    log_level: str = field(
        default="WARNING",
        env_var=LOG_LEVEL_ENV_VAR,
        converter=parse_log_level,
        metadata={"help": "Log level for publish operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var=SETUP_LOG_LEVEL_ENV_VAR,
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    github_token: str = field(
        default="",
        env_var=TOKEN_ENV_VAR,
        metadata={"help": "GitHub token used to create releases and upload assets"},
    )

    def __repr__(self) -> str:
        token = "***" if self.github_token else ""
        return (
            f"PregypRuntimeConfig(log_level={self.log_level!r}, "
            f"setup_log_level={self.setup_log_level!r}, github_token={token!r})"
        )

# 📦🚀🔚
