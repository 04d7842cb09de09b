#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Tracker client module, reports usage events to the analytics endpoint.

Tracking is best effort: failures are logged and reported in the returned dict,
never raised to the caller.
"""

from typing import Any, Dict, Optional

import requests

from scm_client.config import settings
from scm_client.logger import setup_logger
from scm_client.utils.http_client import client_session

logger = setup_logger("tracker_client")


class TrackerClient:
    """Tracker client class, responsible for posting usage events."""

    def __init__(
        self,
        tracker_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the tracker client

        Args:
            tracker_url: URL of the analytics endpoint, defaults to TRACKER_URL
            timeout: Request timeout in seconds, defaults to TRACKER_TIMEOUT
        """
        self.tracker_url = (
            tracker_url if tracker_url is not None else settings.TRACKER_URL
        )
        self.timeout = timeout if timeout is not None else settings.TRACKER_TIMEOUT
        self._session = client_session(timeout=self.timeout)

    def track(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post a usage event.

        Args:
            payload: Event data, e.g.
                {
                    "source": str,  # caller platform
                    "resource": dict,  # resources touched by the run
                    "name": str,
                    "env": str,
                    "orgName": str,
                    "jwt": str,
                }

        Returns:
            Dict[str, Any]: Decoded response of the endpoint, or
            {"success": False, "error_msg": str} when the event was not delivered
        """
        if not self.tracker_url:
            return {"success": False, "error_msg": "No tracker URL configured"}

        logger.info(
            f"Sending tracker event: name={payload.get('name')}, "
            f"env={payload.get('env')}, source={payload.get('source')}"
        )
        try:
            response = self._session.post(self.tracker_url, json=payload)
            response.raise_for_status()
            if not response.content:
                return {"success": True}
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to send tracker event: {e}")
            return {"success": False, "error_msg": str(e)}

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def track(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Post a usage event with the configured tracker client."""
    with TrackerClient() as client:
        return client.track(payload)
