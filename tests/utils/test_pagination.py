# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Tests for page-number pagination of list endpoints
"""

import math

import pytest

from scm_client.utils.pagination import fetch_all_pages


class FakeListEndpoint:
    """List endpoint serving `total` numbered rows, recording every page request"""

    def __init__(self, total):
        self.rows = [{"id": i} for i in range(total)]
        self.calls = []

    def __call__(self, params):
        self.calls.append(dict(params))
        start = (params["page"] - 1) * params["per_page"]
        return self.rows[start : start + params["per_page"]]


@pytest.mark.unit
class TestFetchAllPages:
    """Test fetch_all_pages stopping rule and ordering"""

    @pytest.mark.parametrize("total", [0, 1, 99, 101, 250])
    def test_request_count_for_partial_last_page(self, total):
        """A short last page ends the fetch after ceil(total/per_page) requests"""
        endpoint = FakeListEndpoint(total)

        rows = fetch_all_pages(endpoint, per_page=100)

        assert len(rows) == total
        assert len(endpoint.calls) == max(1, math.ceil(total / 100))

    @pytest.mark.parametrize("total", [100, 200, 300])
    def test_exact_multiple_costs_one_extra_request(self, total):
        """A full last page is confirmed by one more, empty, page"""
        endpoint = FakeListEndpoint(total)

        rows = fetch_all_pages(endpoint, per_page=100)

        assert len(rows) == total
        assert len(endpoint.calls) == total // 100 + 1

    def test_pages_do_not_overlap(self):
        """Rows are concatenated in page order without duplicates"""
        endpoint = FakeListEndpoint(230)

        rows = fetch_all_pages(endpoint, per_page=100)

        ids = [row["id"] for row in rows]
        assert ids == list(range(230))
        assert [call["page"] for call in endpoint.calls] == [1, 2, 3]

    def test_params_are_sent_with_every_page(self):
        """Extra query parameters are repeated on every page request"""
        endpoint = FakeListEndpoint(150)

        fetch_all_pages(endpoint, {"sort": "updated"}, per_page=100)

        for call in endpoint.calls:
            assert call["sort"] == "updated"
            assert call["per_page"] == 100

    def test_caller_params_are_not_mutated(self):
        """The caller's params mapping is left untouched"""
        params = {"affiliation": "owner"}

        fetch_all_pages(FakeListEndpoint(120), params, per_page=100)

        assert params == {"affiliation": "owner"}

    def test_start_page(self):
        """Fetching starts at the requested page"""
        endpoint = FakeListEndpoint(25)

        rows = fetch_all_pages(endpoint, per_page=10, start_page=2)

        assert [row["id"] for row in rows] == list(range(10, 25))
        assert [call["page"] for call in endpoint.calls] == [2, 3]

    def test_error_aborts_whole_fetch(self):
        """An error on a later page propagates and no partial result is returned"""
        calls = []

        def request_page(params):
            calls.append(params["page"])
            if params["page"] == 2:
                raise ConnectionError("connection reset")
            return [{"id": i} for i in range(10)]

        with pytest.raises(ConnectionError):
            fetch_all_pages(request_page, per_page=10)

        assert calls == [1, 2]

    def test_none_page_is_treated_as_empty(self):
        """An empty body ends the fetch"""
        rows = fetch_all_pages(lambda params: None, per_page=100)

        assert rows == []
