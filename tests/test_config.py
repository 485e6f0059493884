"""Tests for gifmaker.config module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from gifmaker.config import (
    DEFAULT_ENCODER_CONFIG,
    DEFAULT_LOGGING_CONFIG,
    EncoderConfig,
    LoggingConfig,
)


class TestEncoderConfig:
    """Tests for EncoderConfig class."""

    def test_default_initialization(self):
        """Test that default values are set correctly."""
        with patch.dict("os.environ", {}, clear=True):
            config = EncoderConfig()

        assert config.LOOP == 0
        assert config.DELAY_UNIT_MS == 10
        assert config.MAX_PALETTE_SIZE == 256
        assert config.MAX_DIMENSION == 65535

    def test_environment_override(self):
        """Test GIFMAKER_LOOP overrides the loop count."""
        with patch.dict("os.environ", {"GIFMAKER_LOOP": "4"}):
            config = EncoderConfig()

        assert config.LOOP == 4

    def test_invalid_environment_value(self):
        """Test a non-integer override names the variable."""
        with patch.dict("os.environ", {"GIFMAKER_LOOP": "forever"}):
            with pytest.raises(ValueError, match="GIFMAKER_LOOP"):
                EncoderConfig()

    def test_negative_loop_rejected(self):
        """Test negative loop counts are invalid."""
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="LOOP"):
                EncoderConfig(LOOP=-1)

    def test_default_instance(self):
        """Test the module-level default is an EncoderConfig."""
        assert isinstance(DEFAULT_ENCODER_CONFIG, EncoderConfig)


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_initialization(self):
        """Test that default values are set correctly."""
        with patch.dict("os.environ", {}, clear=True):
            config = LoggingConfig()

        assert config.LOG_LEVEL == "WARNING"
        assert config.LOG_DIR is None

    def test_environment_overrides(self):
        """Test environment variables override level and directory."""
        env = {"GIFMAKER_LOG_LEVEL": "debug", "GIFMAKER_LOG_DIR": "/tmp/gifmaker-logs"}
        with patch.dict("os.environ", env):
            config = LoggingConfig()

        assert config.LOG_LEVEL == "DEBUG"
        assert config.LOG_DIR == Path("/tmp/gifmaker-logs")

    def test_unknown_level(self):
        """Test an unknown level is rejected."""
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="Unknown log level"):
                LoggingConfig(LOG_LEVEL="chatty")

    def test_default_instance(self):
        """Test the module-level default is a LoggingConfig."""
        assert isinstance(DEFAULT_LOGGING_CONFIG, LoggingConfig)
