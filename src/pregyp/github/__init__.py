#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""GitHub releases API access."""

from __future__ import annotations

from pregyp.github.client import GitHubReleaseClient

__all__ = [
    "GitHubReleaseClient",
]

# 📦🚀🔚
