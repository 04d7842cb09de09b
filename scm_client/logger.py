#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

# -*- coding: utf-8 -*-

"""
Common logging module, configures and provides logging functionality for the client.
"""

import logging
import os
import sys


class NonBlockingStreamHandler(logging.StreamHandler):
    """
    Custom stream handler that handles BlockingIOError gracefully
    """

    def emit(self, record):
        try:
            super().emit(record)
        except BlockingIOError:
            # Non-blocking stdout may be full; the record is dropped
            pass


def setup_logger(
    name,
    level=logging.INFO,
    format="%(asctime)s - [in %(pathname)s:%(lineno)d] - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
):
    """
    Configure and return a logger instance

    If environment variable LOG_LEVEL is set to DEBUG, force log level to DEBUG.

    Args:
        name: Logger name
        level: Logging level, default is INFO
        format: Log message format, default includes line number
        datefmt: Date format for timestamps

    Returns:
        logging.Logger: Configured logger instance
    """
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level and env_log_level.upper() == "DEBUG":
        level = logging.DEBUG

    logger = logging.getLogger(name)

    # Logger already configured, just update level and return
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logger.setLevel(level)
    logger.propagate = False

    console_handler = NonBlockingStreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(console_handler)

    return logger


def mask_token(token):
    """Return a short preview of a secret suitable for log lines."""
    if not token:
        return "none"
    if len(token) > 8:
        return f"{token[:8]}..."
    return "***"
