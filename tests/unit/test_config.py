"""
Unit tests for Sketchfab MCP configuration.
"""

import pytest
from pydantic import ValidationError

from sketchfab_mcp.config import DEFAULT_API_BASE, SketchfabConfig, load_config


class TestSketchfabConfig:
    """Test configuration defaults and environment resolution."""

    def test_default_config(self):
        """Test default configuration values."""
        config = load_config()
        assert config.api_key is None
        assert config.has_api_key is False
        assert config.api_base == DEFAULT_API_BASE
        assert config.request_timeout == 30.0
        assert config.download_timeout == 300.0
        assert config.log_level == "INFO"

    def test_api_key_from_environment(self, monkeypatch):
        """Test SKETCHFAB_API_KEY is picked up."""
        monkeypatch.setenv("SKETCHFAB_API_KEY", "env-key")
        config = load_config()
        assert config.api_key == "env-key"
        assert config.has_api_key is True

    def test_explicit_key_wins_over_environment(self, monkeypatch):
        """Test a key passed on the command line overrides the environment."""
        monkeypatch.setenv("SKETCHFAB_API_KEY", "env-key")
        config = load_config(api_key="cli-key")
        assert config.api_key == "cli-key"

    def test_api_key_from_env_file(self, tmp_path):
        """Test .env in the working directory is read."""
        (tmp_path / ".env").write_text("SKETCHFAB_API_KEY=file-key\n")
        assert load_config().api_key == "file-key"

    def test_blank_key_is_not_configured(self, monkeypatch):
        """Test whitespace-only keys count as missing."""
        monkeypatch.setenv("SKETCHFAB_API_KEY", "   ")
        assert load_config().has_api_key is False

    def test_timeouts_from_environment(self, monkeypatch):
        """Test timeouts are configurable."""
        monkeypatch.setenv("SKETCHFAB_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("SKETCHFAB_DOWNLOAD_TIMEOUT", "60.5")
        config = load_config()
        assert config.request_timeout == 5.0
        assert config.download_timeout == 60.5

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        assert load_config(log_level="debug").log_level == "DEBUG"

    def test_api_base_trailing_slash_removed(self):
        """Test the base URL is normalized."""
        config = SketchfabConfig(api_base="https://example.com/v3/")
        assert config.api_base == "https://example.com/v3"

    def test_config_is_immutable(self):
        """Test configuration cannot be changed after startup."""
        config = load_config(api_key="key")
        with pytest.raises(ValidationError):
            config.api_key = "other"
