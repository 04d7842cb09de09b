# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Input parameter models, one per provider operation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepoParams(BaseModel):
    """Parameters addressing a single repository"""

    model_config = ConfigDict(extra="ignore")

    owner: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)


class ListBranchesParams(RepoParams):
    page: int = Field(1, gt=0)
    # Defaults to DEFAULT_PER_PAGE
    per_page: Optional[int] = Field(None, gt=0)


class GetRefCommitParams(RepoParams):
    # refs/heads/<branch>, refs/tags/<tag> or a bare branch name
    ref: str = Field(..., min_length=1)


class ListWebhookParams(RepoParams):
    page: int = Field(1, gt=0)
    # Defaults to DEFAULT_PER_PAGE
    per_page: Optional[int] = Field(None, gt=0)


class HookParams(RepoParams):
    """Parameters addressing a single webhook of a repository"""

    hook_id: int = Field(..., gt=0)

    @field_validator("hook_id", mode="before")
    @classmethod
    def reject_bool_hook_id(cls, value):
        # bool is an int subclass, True would address hook 1
        if isinstance(value, bool):
            raise ValueError("hook_id must be an integer, not a boolean")
        return value


class GetWebhookParams(HookParams):
    pass


class DeleteWebhookParams(HookParams):
    pass


class WebhookFields(BaseModel):
    """Hook settings accepted by Gitee; unknown fields are forwarded as-is"""

    model_config = ConfigDict(extra="allow")

    url: str = Field(..., min_length=1)
    password: Optional[str] = None
    push_events: Optional[bool] = None
    tag_push_events: Optional[bool] = None
    issues_events: Optional[bool] = None
    note_events: Optional[bool] = None
    merge_requests_events: Optional[bool] = None


class CreateWebhookParams(WebhookFields, RepoParams):
    model_config = ConfigDict(extra="allow")

    push_events: Optional[bool] = True


class UpdateWebhookParams(WebhookFields, HookParams):
    model_config = ConfigDict(extra="allow")


class InitConfigParams(BaseModel):
    """Identity and location for a local git repository"""

    user_name: str = Field(..., min_length=1)
    user_email: str = Field(..., min_length=1)
    # Defaults to the system temp directory
    exec_dir: Optional[str] = None
