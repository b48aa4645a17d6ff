#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the pregyp-github CLI."""

from __future__ import annotations

from pregyp.commands.publish import publish_command

__all__ = [
    "publish_command",
]

# 📦🚀🔚
