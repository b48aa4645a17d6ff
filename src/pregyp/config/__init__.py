#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pregyp-github configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from pregyp.config.runtime import PregypRuntimeConfig, parse_log_level

__all__ = [
    "PregypRuntimeConfig",
    "parse_log_level",
]

# 📦🚀🔚
