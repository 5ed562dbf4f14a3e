"""
Logging helpers for wax-agentkit.

Modules log through ``logging.getLogger(__name__)``; applications call
:func:`setup_logging` once.  Private keys never reach the log stream
unmasked.
"""
from __future__ import annotations

import logging
from typing import Optional


def mask_key(value: Optional[str]) -> str:
    """Mask a private key (or any secret) for display."""
    if not value:
        return "<not set>"
    if len(value) <= 12:
        return "***"
    return f"{value[:4]}...{value[-4:]}"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Set up logging configuration.

    Args:
        level: Log level
        format_string: Custom format string
        json_format: Use JSON formatting
    """
    if format_string is None:
        if json_format:
            format_string = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
        else:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=format_string)

    logging.getLogger("wax_agentkit").setLevel(log_level)
    for noisy in ("httpx", "httpcore", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
