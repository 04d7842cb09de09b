# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

import json
from unittest.mock import Mock

import pytest
import requests

from scm_client.providers.gitee import GiteeProvider

TEST_TOKEN = "gitee_test_token_123456"


def create_mock_response(payload=None, status_code=200):
    """Build a requests.Response stand-in with the given JSON payload"""
    response = Mock()
    response.status_code = status_code
    response.content = b"" if payload is None else json.dumps(payload).encode()
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status = Mock()
    return response


@pytest.fixture
def gitee_provider():
    """Create a GiteeProvider instance with a test token"""
    return GiteeProvider(access_token=TEST_TOKEN, base_url="https://gitee.com/api/v5")


@pytest.fixture
def mock_request(gitee_provider, mocker):
    """Patch the provider's HTTP session; set return_value or side_effect per test"""
    return mocker.patch.object(gitee_provider._session, "request")
