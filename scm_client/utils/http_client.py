# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
HTTP session utilities.

Provides a requests.Session subclass that applies the client's default headers and
timeout to every outbound request, so callers don't need to repeat them at every
call site.

Usage:
    from scm_client.utils.http_client import client_session

    session = client_session(timeout=30)
    session.get("https://gitee.com/api/v5/user/repos", params={"access_token": token})
"""

from typing import Optional

import requests

from scm_client.config import settings


class ClientSession(requests.Session):
    """A requests.Session subclass with a default User-Agent and timeout."""

    def __init__(
        self, user_agent: Optional[str] = None, timeout: Optional[float] = None
    ):
        super().__init__()
        self.timeout = timeout
        self.headers["User-Agent"] = user_agent or settings.USER_AGENT
        self.headers["Accept"] = "application/json"

    def request(self, method, url, **kwargs):
        if self.timeout is not None:
            kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def client_session(
    user_agent: Optional[str] = None, timeout: Optional[float] = None
) -> ClientSession:
    """Create a new requests session with the client defaults."""
    return ClientSession(user_agent=user_agent, timeout=timeout)
