# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Page-number pagination for list endpoints.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from scm_client.logger import setup_logger

logger = setup_logger(__name__)


def fetch_all_pages(
    request_page: Callable[[Dict[str, Any]], List[Any]],
    params: Optional[Mapping[str, Any]] = None,
    per_page: int = 100,
    start_page: int = 1,
) -> List[Any]:
    """
    Fetch every page of a list endpoint and concatenate the rows.

    Pages are requested one at a time, starting at start_page, until a page holds
    fewer than per_page rows. When the total is an exact multiple of per_page this
    costs one extra request that returns an empty page.

    Args:
        request_page: Callable issuing the GET for one page and returning its rows
        params: Query parameters sent with every page
        per_page: Rows requested per page
        start_page: First page number

    Returns:
        All rows in page order

    Raises:
        Whatever request_page raises; rows fetched so far are discarded
    """
    rows: List[Any] = []
    page = start_page

    while True:
        page_params = dict(params or {})
        page_params["page"] = page
        page_params["per_page"] = per_page

        data = request_page(page_params) or []
        rows.extend(data)
        logger.debug(f"Fetched page {page}: {len(data)} rows, {len(rows)} total")

        if len(data) != per_page:
            break
        page += 1

    return rows
