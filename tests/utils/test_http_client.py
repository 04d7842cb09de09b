# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import patch

import requests

from scm_client.utils.http_client import ClientSession, client_session


class TestClientSession:
    """Test default headers and timeout of the client session"""

    def test_default_headers(self):
        session = client_session(user_agent="scm-client-test")

        assert isinstance(session, ClientSession)
        assert session.headers["User-Agent"] == "scm-client-test"
        assert session.headers["Accept"] == "application/json"

    @patch.object(requests.Session, "request")
    def test_default_timeout_applied(self, mock_request):
        session = client_session(timeout=12.5)

        session.request("GET", "https://gitee.com/api/v5/user")

        assert mock_request.call_args.kwargs["timeout"] == 12.5

    @patch.object(requests.Session, "request")
    def test_explicit_timeout_wins(self, mock_request):
        session = client_session(timeout=12.5)

        session.request("GET", "https://gitee.com/api/v5/user", timeout=3)

        assert mock_request.call_args.kwargs["timeout"] == 3

    @patch.object(requests.Session, "request")
    def test_no_timeout_by_default(self, mock_request):
        session = client_session()

        session.request("GET", "https://gitee.com/api/v5/user")

        assert "timeout" not in mock_request.call_args.kwargs
