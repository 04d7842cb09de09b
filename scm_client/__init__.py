# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Thin client library for Git hosting platforms.

Usage:
    from scm_client import GiteeProvider

    gitee = GiteeProvider(access_token="...")

    # List branches of a repository
    branches = gitee.list_branches({"owner": "octo", "repo": "demo"})

    # Resolve a ref to its commit
    commit = gitee.get_ref_commit({"owner": "octo", "repo": "demo", "ref": "refs/tags/v1.0"})
"""

from scm_client.exceptions import (
    ScmClientException,
    UnsupportedProviderException,
    ValidationException,
)
from scm_client.providers import (
    GiteeProvider,
    GitProvider,
    ProviderConfig,
    get_provider_by_type,
)
from scm_client.utils.git_util import init_config
from scm_client.utils.tracker_client import TrackerClient, track

__version__ = "0.1.0"

__all__ = [
    "GitProvider",
    "GiteeProvider",
    "ProviderConfig",
    "ScmClientException",
    "TrackerClient",
    "UnsupportedProviderException",
    "ValidationException",
    "get_provider_by_type",
    "init_config",
    "track",
]
