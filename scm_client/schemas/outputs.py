# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Normalized output models.

Every model keeps the unmodified platform payload under ``source`` so callers can
reach fields that are not surfaced here.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class SourceModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Dict[str, Any]


class Repository(SourceModel):
    """Repository owned by the authenticated identity"""

    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None


class Branch(SourceModel):
    """Branch with its head commit"""

    name: Optional[str] = None
    commit_sha: Optional[str] = None


class Commit(SourceModel):
    """Commit resolved from a branch head or a tag target"""

    sha: Optional[str] = None
    message: Optional[str] = None


class Webhook(SourceModel):
    """Webhook as returned by list and get operations"""

    id: Optional[int] = None
    url: Optional[str] = None


class CreatedWebhook(SourceModel):
    """Result of creating a webhook"""

    id: Optional[int] = None
