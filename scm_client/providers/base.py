# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Base interface for Git hosting platform providers.

This module provides the abstract interface every platform implementation satisfies
and the connection configuration shared by all of them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from scm_client.logger import mask_token, setup_logger
from scm_client.schemas.inputs import (
    CreateWebhookParams,
    DeleteWebhookParams,
    GetRefCommitParams,
    GetWebhookParams,
    ListBranchesParams,
    ListWebhookParams,
    UpdateWebhookParams,
)
from scm_client.schemas.outputs import (
    Branch,
    Commit,
    CreatedWebhook,
    Repository,
    Webhook,
)

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    """Connection configuration, read-only once a provider is built."""

    access_token: str
    # API root including the version segment (e.g., "https://gitee.com/api/v5")
    base_url: str
    timeout: Optional[float] = None


class GitProvider(ABC):
    """Abstract base class for Git hosting platform providers."""

    config: ProviderConfig

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for display."""
        pass

    @abstractmethod
    def list_repos(self) -> List[Repository]:
        """List all repositories owned by the authenticated identity."""
        pass

    @abstractmethod
    def list_branches(
        self, params: Union[ListBranchesParams, Mapping[str, Any]]
    ) -> List[Branch]:
        """List all branches of a repository."""
        pass

    @abstractmethod
    def get_ref_commit(
        self, params: Union[GetRefCommitParams, Mapping[str, Any]]
    ) -> Commit:
        """Resolve a branch or tag ref to its commit."""
        pass

    @abstractmethod
    def list_webhook(
        self, params: Union[ListWebhookParams, Mapping[str, Any]]
    ) -> List[Webhook]:
        """List all webhooks of a repository."""
        pass

    @abstractmethod
    def get_webhook(
        self, params: Union[GetWebhookParams, Mapping[str, Any]]
    ) -> Webhook:
        """Get a single webhook."""
        pass

    @abstractmethod
    def create_webhook(
        self, params: Union[CreateWebhookParams, Mapping[str, Any]]
    ) -> CreatedWebhook:
        """Register a new webhook."""
        pass

    @abstractmethod
    def update_webhook(
        self, params: Union[UpdateWebhookParams, Mapping[str, Any]]
    ) -> None:
        """Update an existing webhook."""
        pass

    @abstractmethod
    def delete_webhook(
        self, params: Union[DeleteWebhookParams, Mapping[str, Any]]
    ) -> None:
        """Delete a webhook."""
        pass

    def _log_api_request(
        self, method: str, url: str, params: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log API request details with the access token masked."""
        query = {
            key: value for key, value in (params or {}).items() if key != "access_token"
        }
        logger.info(
            f"{self.name} API request: {method} {url}, "
            f"token_preview={mask_token(self.config.access_token)}, "
            f"params={query}"
        )

    def _log_api_response(self, method: str, url: str, status_code: int) -> None:
        """Log API response details."""
        logger.info(
            f"{self.name} API response: {method} {url}, status_code={status_code}"
        )
