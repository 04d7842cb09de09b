# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Git hosting platform providers package.

This module provides the factory function for creating providers and exports all
provider classes.
"""

from scm_client.exceptions import UnsupportedProviderException
from scm_client.providers.base import GitProvider, ProviderConfig
from scm_client.providers.gitee import GiteeProvider

__all__ = [
    "GitProvider",
    "GiteeProvider",
    "ProviderConfig",
    "get_provider_by_type",
]

# Provider type to class mapping
PROVIDER_TYPE_MAP = {
    "gitee": GiteeProvider,
}


def get_provider_by_type(git_type: str, **kwargs) -> GitProvider:
    """
    Get the provider for a Git hosting platform type.

    Args:
        git_type: Platform type (e.g., "gitee")
        **kwargs: Passed to the provider constructor (config, access_token, ...)

    Returns:
        GitProvider instance

    Raises:
        UnsupportedProviderException: When the type is unknown
    """
    provider_class = PROVIDER_TYPE_MAP.get((git_type or "").lower())
    if provider_class is None:
        raise UnsupportedProviderException(git_type)
    return provider_class(**kwargs)
