"""Logging setup shared by the API process."""

import logging

from src.config.settings import get_settings


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL setting."""
    level = get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
