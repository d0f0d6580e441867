"""Configuration settings for the tTime application."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration settings.

    Centralized configuration to avoid hardcoded values throughout the codebase.
    """
    # Formatting
    angle_precision: int = 4

    # Logging
    log_level: str = "WARNING"
    log_file: Path = Path("~/.ttime/ttime.log").expanduser()

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Defaults can be overridden with the TTIME_LOG_LEVEL and
        TTIME_ANGLE_PRECISION environment variables. An unknown level name
        or an unparseable precision falls back to the default.

        Returns:
            Config instance with default or loaded values
        """
        cfg = cls()
        log_level = os.environ.get("TTIME_LOG_LEVEL")
        if log_level:
            # getLevelName returns an int only for registered level names
            if isinstance(logging.getLevelName(log_level.upper()), int):
                cfg.log_level = log_level.upper()
        precision = os.environ.get("TTIME_ANGLE_PRECISION")
        if precision:
            try:
                cfg.angle_precision = max(0, int(precision))
            except ValueError:
                pass
        return cfg


# Global config instance
config = Config.load()
