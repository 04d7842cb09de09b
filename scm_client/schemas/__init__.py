# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

from scm_client.schemas.inputs import (
    CreateWebhookParams,
    DeleteWebhookParams,
    GetRefCommitParams,
    GetWebhookParams,
    InitConfigParams,
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

__all__ = [
    "Branch",
    "Commit",
    "CreateWebhookParams",
    "CreatedWebhook",
    "DeleteWebhookParams",
    "GetRefCommitParams",
    "GetWebhookParams",
    "InitConfigParams",
    "ListBranchesParams",
    "ListWebhookParams",
    "Repository",
    "UpdateWebhookParams",
    "Webhook",
]
