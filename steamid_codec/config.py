"""
Configuration - environment driven.
Reads STEAMID_* variables, optionally from a .env file in the working directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from steamid_codec.utils.i18n import t

logger = logging.getLogger("steamidcodec.config")


__all__ = ["Config", "config"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """
    Central configuration for the command line front end.
    The codec itself never reads configuration.
    """

    UI_LANGUAGE: str = "en"
    LOG_LEVEL: int = logging.WARNING
    LOG_FILE: Path | None = None

    # Default for the --newer-format switch (STEAM_1 instead of STEAM_0)
    STEAM2_NEWER_FORMAT: bool = False

    def __post_init__(self):
        """Overlay environment variables after instantiation."""
        load_dotenv(find_dotenv(usecwd=True))
        self._load_environment()

    def _load_environment(self) -> None:
        """Read STEAMID_* variables from the process environment."""
        language = os.getenv("STEAMID_UI_LANGUAGE")
        if language:
            self.UI_LANGUAGE = language.strip()

        level_name = os.getenv("STEAMID_LOG_LEVEL")
        if level_name:
            level = logging.getLevelName(level_name.strip().upper())
            if isinstance(level, int):
                self.LOG_LEVEL = level
            else:
                logger.warning(
                    t(
                        "logs.config.invalid_log_level",
                        value=level_name,
                        default=logging.getLevelName(self.LOG_LEVEL),
                    )
                )

        log_file = os.getenv("STEAMID_LOG_FILE")
        if log_file:
            self.LOG_FILE = Path(log_file).expanduser()

        newer = os.getenv("STEAMID_STEAM2_NEWER_FORMAT")
        if newer:
            value = newer.strip().lower()
            if value in _TRUE_VALUES:
                self.STEAM2_NEWER_FORMAT = True
            elif value in _FALSE_VALUES:
                self.STEAM2_NEWER_FORMAT = False
            else:
                logger.warning(
                    t(
                        "logs.config.invalid_bool",
                        value=newer,
                        name="STEAMID_STEAM2_NEWER_FORMAT",
                        default=self.STEAM2_NEWER_FORMAT,
                    )
                )


# Global instance
config = Config()
