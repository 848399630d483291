"""Logging setup for the engine and its front-ends."""

import logging
import sys

from src.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> None:
    """Configure the root logger once, using the level from the settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(__name__).debug("Logging configuration initialized")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
