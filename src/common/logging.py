"""
Logging configuration helpers.
It centralizes process-wide logging setup shared by the web app and the launcher.
Keeping this isolated means handlers and the format are configured exactly once.
"""

from __future__ import annotations

import logging

from src.api.api_config import get_api_config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging from the service config."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_name = (level_name or get_api_config().log_level).upper()
    level = getattr(logging, resolved_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
