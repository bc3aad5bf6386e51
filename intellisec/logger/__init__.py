"""Logger module for the IntelliSec backend

Usage:
    from intellisec.logger import session_logger as logger

    logger.info("Scan completed", text_length=42)

Custom implementations subclass ``Logger`` and can be passed to the web
server in place of the shared session logger.
"""

import logging
import os

from .base import Logger
from .structured_logger import StructuredLogger, JsonFormatter, TextFormatter

# Configuration from environment
LOG_LEVEL_STR = os.environ.get("INTELLISEC_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("INTELLISEC_LOG_FILE")
LOG_JSON = os.environ.get("INTELLISEC_LOG_JSON", "false").lower() == "true"

LOG_LEVEL = getattr(logging, LOG_LEVEL_STR, logging.INFO)

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=LOG_LEVEL,
    log_file=LOG_FILE,
    json_format=LOG_JSON,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "session_logger",
]
