# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Coze JWT Issuer Logging Adapter.

Structured, configurable logging shared by the token issuer service and
its serverless entry point.

Example:
    >>> from coze_logging import create_logger
    >>>
    >>> # Create a logger with structured output
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="token-issuer")
    >>> logger.info("Token issued", coze_app_id="app123", ttl_seconds=600)
    >>>
    >>> # Create a silent logger for testing
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("Test message")
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
]
