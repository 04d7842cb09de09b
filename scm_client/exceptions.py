# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0


class ScmClientException(Exception):
    """Base exception of the client"""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationException(ScmClientException, ValueError):
    """Missing or malformed operation parameters"""


class UnsupportedProviderException(ScmClientException):
    """Unknown Git hosting platform"""

    def __init__(self, git_type: str):
        super().__init__(f"Unsupported git provider type: {git_type}")
        self.git_type = git_type
