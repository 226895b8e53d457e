"""Logging setup shared by the CLI and the API"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure stdlib logging for the application.

    Args:
        log_level: Level name such as "DEBUG". Defaults to LOG_LEVEL from config.
    """
    if log_level is None:
        from core.config import get_config

        log_level = get_config().log_level

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
