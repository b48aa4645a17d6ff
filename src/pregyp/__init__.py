#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pregyp-github core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from pregyp.exceptions import (
    AuthError,
    ConfigError,
    DuplicateAssetError,
    EmptyStageError,
    FilesystemError,
    PregypException,
    RemoteServiceError,
)
from pregyp.manifest import ProjectManifest, load_manifest
from pregyp.models import Asset, Release
from pregyp.publisher import PublishOptions, PublishResult, publish
from pregyp.target import ReleaseTarget, resolve, resolve_tag

__version__ = get_version("pregyp-github", caller_file=__file__)

__all__ = [
    "Asset",
    "AuthError",
    "ConfigError",
    "DuplicateAssetError",
    "EmptyStageError",
    "FilesystemError",
    "PregypException",
    "ProjectManifest",
    "PublishOptions",
    "PublishResult",
    "Release",
    "ReleaseTarget",
    "RemoteServiceError",
    "__version__",
    "load_manifest",
    "publish",
    "resolve",
    "resolve_tag",
]

# 📦🚀🔚
