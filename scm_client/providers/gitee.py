# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""Gitee repository provider implementation."""

from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from scm_client.config import settings
from scm_client.exceptions import ValidationException
from scm_client.logger import setup_logger
from scm_client.providers.base import GitProvider, ProviderConfig
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
from scm_client.utils.http_client import client_session
from scm_client.utils.pagination import fetch_all_pages
from scm_client.utils.validation import (
    validate_create_webhook_params,
    validate_delete_webhook_params,
    validate_get_ref_commit_params,
    validate_get_webhook_params,
    validate_list_branches_params,
    validate_list_webhook_params,
    validate_update_webhook_params,
)

logger = setup_logger(__name__)

TAG_REF_PREFIX = "refs/tags/"
BRANCH_REF_PREFIX = "refs/heads/"

# Path fields never sent to Gitee as hook settings
HOOK_PATH_FIELDS = {"owner", "repo", "hook_id"}


def _get(data: Any, path: str, default: Any = None) -> Any:
    """Read a dotted path (e.g., "commit.sha") from nested dicts."""
    current = data
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class GiteeProvider(GitProvider):
    """
    Gitee provider over the v5 REST API.

    API reference: https://gitee.com/api/v5/swagger
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        per_page: Optional[int] = None,
    ):
        if config is None:
            config = ProviderConfig(
                access_token=(
                    access_token
                    if access_token is not None
                    else settings.GITEE_ACCESS_TOKEN
                ),
                base_url=base_url or settings.GITEE_API_BASE_URL,
                timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            )

        if not config.access_token or not isinstance(config.access_token, str):
            raise ValidationException("Access token is required")

        self.config = config
        self.base_url = config.base_url.rstrip("/")
        # None follows DEFAULT_PER_PAGE at request time
        self.per_page = per_page
        self._session = client_session(timeout=config.timeout)

    @property
    def name(self) -> str:
        return "Gitee"

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # https://gitee.com/api/v5/swagger#/getV5UserRepos
    def list_repos(self) -> List[Repository]:
        rows = self._request_list(
            "/user/repos",
            {"affiliation": "owner", "sort": settings.DEFAULT_SORT},
            per_page=self._page_size(),
        )
        return [
            Repository(
                id=row.get("id"),
                name=row.get("name"),
                url=row.get("html_url"),
                source=row,
            )
            for row in rows
        ]

    # https://gitee.com/api/v5/swagger#/getV5ReposOwnerRepoBranches
    def list_branches(
        self, params: Union[ListBranchesParams, Mapping[str, Any]]
    ) -> List[Branch]:
        params = validate_list_branches_params(params)

        rows = self._request_list(
            f"/repos/{_segment(params.owner)}/{_segment(params.repo)}/branches",
            {"sort": settings.DEFAULT_SORT},
            per_page=self._page_size(params.per_page),
            start_page=params.page,
        )
        return [
            Branch(name=row.get("name"), commit_sha=_get(row, "commit.sha"), source=row)
            for row in rows
        ]

    # https://gitee.com/api/v5/swagger#/getV5ReposOwnerRepoBranchesBranch
    # https://gitee.com/api/v5/swagger#/getV5ReposOwnerRepoReleasesTagsTag
    def get_ref_commit(
        self, params: Union[GetRefCommitParams, Mapping[str, Any]]
    ) -> Commit:
        params = validate_get_ref_commit_params(params)
        repo_path = f"/repos/{_segment(params.owner)}/{_segment(params.repo)}"
        ref = params.ref

        if ref.startswith(TAG_REF_PREFIX):
            tag = ref[len(TAG_REF_PREFIX) :]
            if not tag:
                raise ValidationException(f"Invalid ref: {ref} names no tag")
            source = self._request_v5(
                f"{repo_path}/releases/tags/{_segment(tag)}", "GET"
            )
            source = source or {}
            return Commit(
                sha=source.get("target_commitish"),
                message=source.get("tag_name"),
                source=source,
            )

        # Anything that is not a tag ref is treated as a branch name
        branch = ref
        if ref.startswith(BRANCH_REF_PREFIX):
            branch = ref[len(BRANCH_REF_PREFIX) :]
        if not branch:
            raise ValidationException(f"Invalid ref: {ref} names no branch")
        source = self._request_v5(f"{repo_path}/branches/{_segment(branch)}", "GET")
        source = source or {}
        return Commit(
            sha=_get(source, "commit.sha"),
            message=_get(source, "commit.commit.message"),
            source=source,
        )

    # https://gitee.com/api/v5/swagger#/getV5ReposOwnerRepoHooks
    def list_webhook(
        self, params: Union[ListWebhookParams, Mapping[str, Any]]
    ) -> List[Webhook]:
        params = validate_list_webhook_params(params)

        rows = self._request_list(
            f"/repos/{_segment(params.owner)}/{_segment(params.repo)}/hooks",
            {"sort": settings.DEFAULT_SORT},
            per_page=self._page_size(params.per_page),
            start_page=params.page,
        )
        return [
            Webhook(id=row.get("id"), url=row.get("url"), source=row) for row in rows
        ]

    # https://gitee.com/api/v5/swagger#/getV5ReposOwnerRepoHooksId
    def get_webhook(
        self, params: Union[GetWebhookParams, Mapping[str, Any]]
    ) -> Webhook:
        params = validate_get_webhook_params(params)

        source = self._request_v5(self._hook_path(params), "GET") or {}
        return Webhook(id=source.get("id"), url=source.get("url"), source=source)

    # https://gitee.com/api/v5/swagger#/postV5ReposOwnerRepoHooks
    def create_webhook(
        self, params: Union[CreateWebhookParams, Mapping[str, Any]]
    ) -> CreatedWebhook:
        params = validate_create_webhook_params(params)

        source = self._request_v5(
            f"/repos/{_segment(params.owner)}/{_segment(params.repo)}/hooks",
            "POST",
            json=self._hook_body(params),
        )
        source = source or {}
        logger.info(
            f"Created Gitee webhook {source.get('id')} for {params.owner}/{params.repo}"
        )
        return CreatedWebhook(id=source.get("id"), source=source)

    # https://gitee.com/api/v5/swagger#/patchV5ReposOwnerRepoHooksId
    def update_webhook(
        self, params: Union[UpdateWebhookParams, Mapping[str, Any]]
    ) -> None:
        params = validate_update_webhook_params(params)

        self._request_v5(self._hook_path(params), "PATCH", json=self._hook_body(params))

    # https://gitee.com/api/v5/swagger#/deleteV5ReposOwnerRepoHooksId
    def delete_webhook(
        self, params: Union[DeleteWebhookParams, Mapping[str, Any]]
    ) -> None:
        params = validate_delete_webhook_params(params)

        self._request_v5(self._hook_path(params), "DELETE")

    def _page_size(self, requested: Optional[int] = None) -> int:
        return requested or self.per_page or settings.DEFAULT_PER_PAGE

    def _hook_path(self, params) -> str:
        return (
            f"/repos/{_segment(params.owner)}/{_segment(params.repo)}"
            f"/hooks/{_segment(params.hook_id)}"
        )

    def _hook_body(self, params) -> Dict[str, Any]:
        return params.model_dump(exclude=HOOK_PATH_FIELDS, exclude_none=True)

    def _request_v5(
        self,
        path: str,
        method: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Issue one request against the v5 API.

        The access token is always sent as a query parameter. Non-2xx responses raise
        requests.HTTPError unchanged.

        Returns:
            Decoded JSON body, or None for an empty body
        """
        url = f"{self.base_url}{path}"
        query = dict(params or {})
        query["access_token"] = self.config.access_token

        self._log_api_request(method, url, query)
        response = self._session.request(method, url, params=query, json=json)
        self._log_api_response(method, url, response.status_code)

        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    def _request_list(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        per_page: int = 100,
        start_page: int = 1,
    ) -> List[Dict[str, Any]]:
        return fetch_all_pages(
            lambda page_params: self._request_v5(path, "GET", params=page_params),
            params,
            per_page=per_page,
            start_page=start_page,
        )
