"""Tests for Time Library configuration.

These tests demonstrate:
1. Default value behavior
2. Environment variable loading
3. Validation of settings
4. Singleton access and reset
"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from time_library.config import LibrarySettings, get_config, reset_config


class TestLibrarySettings:
    """Test settings loading and validation."""

    def test_default_configuration(self):
        """Test the defaults used when nothing is configured."""
        config = LibrarySettings()

        assert config.library_name == "time-library"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.strict_timelines is False
        assert config.default_year == 1899
        assert config.effective_log_level == logging.INFO

    def test_environment_variable_loading(self):
        """Test loading settings from TIME_LIBRARY_* variables."""
        env_vars = {
            "TIME_LIBRARY_LIBRARY_NAME": "bodleian",
            "TIME_LIBRARY_LOG_LEVEL": "warning",
            "TIME_LIBRARY_STRICT_TIMELINES": "true",
            "TIME_LIBRARY_DEFAULT_YEAR": "1613",
        }

        with patch.dict(os.environ, env_vars):
            config = LibrarySettings()

            assert config.library_name == "bodleian"
            assert config.log_level == "WARNING"
            assert config.strict_timelines is True
            assert config.default_year == 1613

    def test_debug_overrides_log_level(self, test_config: LibrarySettings):
        """Test that debug forces DEBUG logging."""
        assert test_config.effective_log_level == logging.DEBUG

        config = LibrarySettings(debug=True, log_level="ERROR")
        assert config.effective_log_level == logging.DEBUG

    def test_invalid_values_rejected(self):
        """Test validation of malformed settings."""
        with pytest.raises(ValidationError):
            LibrarySettings(log_level="TRACE")

        with pytest.raises(ValidationError):
            LibrarySettings(library_name="Time Library")

        with pytest.raises(ValidationError):
            LibrarySettings(default_year=-1)

    def test_library_name_description(self):
        """Test that library_name documents where the name is used."""
        description = LibrarySettings.model_fields["library_name"].description

        assert "log record" in description
        assert "banner" not in description


class TestConfigSingleton:
    """Test the shared configuration instance."""

    def test_get_config_returns_same_instance(self):
        """Test that components share one settings object."""
        assert get_config() is get_config()

    def test_reset_config_reloads_environment(self):
        """Test that reset picks up environment changes."""
        first = get_config()
        assert first.strict_timelines is False

        with patch.dict(os.environ, {"TIME_LIBRARY_STRICT_TIMELINES": "1"}):
            reset_config()
            second = get_config()

        assert second is not first
        assert second.strict_timelines is True
