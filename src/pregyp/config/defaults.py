#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for pregyp-github."""

from __future__ import annotations

# =================================
# Environment
# =================================
TOKEN_ENV_VAR = "NODE_PRE_GYP_GITHUB_TOKEN"
LOG_LEVEL_ENV_VAR = "PREGYP_LOG_LEVEL"
SETUP_LOG_LEVEL_ENV_VAR = "PREGYP_SETUP_LOG_LEVEL"

# =================================
# Project layout
# =================================
MANIFEST_FILE = "package.json"
BUILD_DIR = "build"
STAGE_DIR = "stage"
VERSION_PLACEHOLDER = "{version}"

# =================================
# Release defaults
# =================================
DEFAULT_TARGET_COMMITISH = "master"
DEFAULT_DRAFT = True
DEFAULT_PRERELEASE = False
DEFAULT_USER_AGENT = "node-pre-gyp-github"

# =================================
# GitHub REST API
# =================================
GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
RELEASES_PER_PAGE = 100

# 📦🚀🔚
