# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Gitee API configuration
    GITEE_API_BASE_URL: str = "https://gitee.com/api/v5"
    GITEE_ACCESS_TOKEN: str = ""

    # Pagination configuration
    DEFAULT_PER_PAGE: int = 100
    DEFAULT_SORT: str = "updated"

    # HTTP configuration, None means the transport never times out
    REQUEST_TIMEOUT: Optional[float] = None
    USER_AGENT: str = "scm-client"

    # Tracker configuration, empty URL disables tracking
    TRACKER_URL: str = ""
    TRACKER_TIMEOUT: float = 10.0

    # Logging configuration
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
