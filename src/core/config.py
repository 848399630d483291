"""
Configuration Management

Settings are read from environment variables (a local .env file is loaded first).
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings. Every value has a default suitable for a local game."""

    def __init__(self) -> None:
        self.log_level: str = os.getenv("MICATTIX_LOG_LEVEL", "INFO")
        self.default_board_size: Optional[str] = os.getenv("MICATTIX_BOARD_SIZE")
        self.default_game_mode: Optional[str] = os.getenv("MICATTIX_GAME_MODE")

        seed_str = os.getenv("MICATTIX_SEED", "").strip()
        try:
            self.seed: Optional[int] = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ValueError(
                f"Invalid MICATTIX_SEED value: {seed_str!r}. Must be an integer."
            ) from e


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
