"""Configuration settings for gifmaker."""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_int(env_var_name: str, current: int) -> int:
    env_value = os.getenv(env_var_name)
    if not env_value:
        return current
    try:
        return int(env_value)
    except ValueError as e:
        raise ValueError(f"{env_var_name} must be an integer, got {env_value!r}") from e


@dataclass
class EncoderConfig:
    """Configuration for the GIF container encoder."""

    # Number of times the animation repeats; 0 loops forever.
    # Override with: GIFMAKER_LOOP
    LOOP: int = 0

    # Frame delays are written in hundredths of a second, Pillow wants ms.
    DELAY_UNIT_MS: int = 10

    # GIF colour tables hold at most 256 entries.
    MAX_PALETTE_SIZE: int = 256

    # Logical screen and image sizes are 16-bit fields.
    MAX_DIMENSION: int = 65535

    def __post_init__(self) -> None:
        """Apply environment variable overrides after initialization."""
        self.LOOP = _env_int("GIFMAKER_LOOP", self.LOOP)

        if self.LOOP < 0:
            raise ValueError(f"LOOP must be >= 0, got {self.LOOP}")
        if self.DELAY_UNIT_MS < 1:
            raise ValueError(f"DELAY_UNIT_MS must be >= 1, got {self.DELAY_UNIT_MS}")


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    # Override with: GIFMAKER_LOG_LEVEL
    LOG_LEVEL: str = "WARNING"

    # Directory for timestamped log files; None logs to stderr only.
    # Override with: GIFMAKER_LOG_DIR
    LOG_DIR: Path | None = None

    def __post_init__(self) -> None:
        """Apply environment variable overrides after initialization."""
        env_level = os.getenv("GIFMAKER_LOG_LEVEL")
        if env_level:
            self.LOG_LEVEL = env_level

        env_dir = os.getenv("GIFMAKER_LOG_DIR")
        if env_dir:
            self.LOG_DIR = Path(env_dir)

        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {self.LOG_LEVEL}")


DEFAULT_ENCODER_CONFIG = EncoderConfig()
DEFAULT_LOGGING_CONFIG = LoggingConfig()
