"""Centralized logging configuration."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "promptpage"


def setup_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Get or create the configured application logger.

    Handlers live on the ``promptpage`` logger only; module loggers obtained
    with ``logging.getLogger(__name__)`` propagate to it.

    Args:
        name: Logger name. If None, uses 'promptpage'.
        level: Level name applied to the application logger.

    Returns:
        Configured logging.Logger instance.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid adding handlers multiple times
    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

    return logging.getLogger(name or ROOT_LOGGER)
