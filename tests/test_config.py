# ABOUTME: Tests for the configuration module.
# ABOUTME: Covers ClientConfig validation, Settings environment overrides, and settings caching.

import os
import tempfile
from pathlib import Path
from unittest import mock

import pytest
from pydantic import ValidationError

from linkdapi.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    Settings,
    get_settings,
)


class TestClientConfigDefaults:
    """Tests for ClientConfig default values."""

    def test_defaults(self) -> None:
        """Test that only the API key is required."""
        config = ClientConfig(api_key="test-api-key")
        assert config.base_url == "https://linkdapi.com"
        assert config.timeout_ms == 30000
        assert config.max_retries == 3
        assert config.retry_delay_ms == 1000

    def test_default_constants(self) -> None:
        assert DEFAULT_BASE_URL == "https://linkdapi.com"
        assert DEFAULT_TIMEOUT_MS == 30000
        assert DEFAULT_MAX_RETRIES == 3
        assert DEFAULT_RETRY_DELAY_MS == 1000

    def test_timeout_seconds(self) -> None:
        config = ClientConfig(api_key="test-api-key", timeout_ms=1500)
        assert config.timeout_seconds == 1.5


class TestClientConfigValidation:
    """Tests for ClientConfig validation rules."""

    @pytest.mark.parametrize("api_key", ["", "   ", "\t\n"])
    def test_blank_api_key_rejected(self, api_key: str) -> None:
        """Test that empty and whitespace-only keys are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(api_key=api_key)
        assert "API key is required" in str(exc_info.value)

    def test_zero_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(api_key="test-api-key", timeout_ms=0)

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(api_key="test-api-key", max_retries=-1)

    def test_zero_retries_allowed(self) -> None:
        assert ClientConfig(api_key="test-api-key", max_retries=0).max_retries == 0

    def test_zero_retry_delay_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(api_key="test-api-key", retry_delay_ms=0)

    def test_trailing_slash_stripped(self) -> None:
        """Test that a trailing slash on the base URL is ignored."""
        config = ClientConfig(api_key="test-api-key", base_url="http://localhost:8080/")
        assert config.base_url == "http://localhost:8080"

    def test_config_is_frozen(self) -> None:
        """Test that a config cannot be changed after creation."""
        config = ClientConfig(api_key="test-api-key")
        with pytest.raises(ValidationError):
            config.max_retries = 10  # type: ignore[misc]


class TestSettingsDefaults:
    """Tests for Settings class default values."""

    def test_accounts_file_default(self) -> None:
        """Test that accounts_file defaults to ~/.linkdapi/accounts.json."""
        settings = Settings()
        assert settings.accounts_file == Path.home() / ".linkdapi" / "accounts.json"

    def test_log_level_default(self) -> None:
        assert Settings().log_level == "WARNING"

    def test_request_defaults_match_client_defaults(self) -> None:
        settings = Settings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_ms == DEFAULT_TIMEOUT_MS
        assert settings.max_retries == DEFAULT_MAX_RETRIES
        assert settings.retry_delay_ms == DEFAULT_RETRY_DELAY_MS


class TestSettingsEnvironmentOverrides:
    """Tests for environment variable overrides."""

    def test_api_key_from_env(self) -> None:
        with mock.patch.dict(os.environ, {"LINKDAPI_API_KEY": "env-api-key"}):
            assert Settings().api_key == "env-api-key"

    def test_request_options_from_env(self) -> None:
        """Test that timeout and retry options can be overridden."""
        env_vars = {
            "LINKDAPI_BASE_URL": "http://localhost:9000",
            "LINKDAPI_TIMEOUT_MS": "5000",
            "LINKDAPI_MAX_RETRIES": "0",
            "LINKDAPI_RETRY_DELAY_MS": "250",
        }
        with mock.patch.dict(os.environ, env_vars):
            settings = Settings()

        assert settings.base_url == "http://localhost:9000"
        assert settings.timeout_ms == 5000
        assert settings.max_retries == 0
        assert settings.retry_delay_ms == 250

    def test_accounts_file_from_env(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            custom_path = Path(tmpdir) / "keys.json"
            with mock.patch.dict(os.environ, {"LINKDAPI_ACCOUNTS_FILE": str(custom_path)}):
                assert Settings().accounts_file == custom_path

    def test_log_level_from_env_is_normalized(self) -> None:
        with mock.patch.dict(os.environ, {"LINKDAPI_LOG_LEVEL": " debug "}):
            assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        """Test that a level the logging module cannot use fails as a settings error."""
        with mock.patch.dict(os.environ, {"LINKDAPI_LOG_LEVEL": "verbose"}):
            with pytest.raises(ValidationError) as exc_info:
                Settings()
        assert "log_level" in str(exc_info.value)

    def test_invalid_timeout_from_env_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"LINKDAPI_TIMEOUT_MS": "0"}):
            with pytest.raises(ValidationError):
                Settings()


class TestSettingsToClientConfig:
    """Tests for building a ClientConfig from Settings."""

    def test_uses_configured_values(self) -> None:
        settings = Settings(api_key="settings-key", max_retries=1, retry_delay_ms=50)
        config = settings.to_client_config()

        assert config.api_key == "settings-key"
        assert config.max_retries == 1
        assert config.retry_delay_ms == 50

    def test_explicit_key_overrides_settings(self) -> None:
        settings = Settings(api_key="settings-key")
        assert settings.to_client_config(api_key="other-key").api_key == "other-key"

    def test_missing_key_rejected(self) -> None:
        """Test that a config cannot be built without any key."""
        with pytest.raises(ValidationError):
            Settings(api_key=None).to_client_config()


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_cache_clear_reloads_environment(self) -> None:
        get_settings.cache_clear()
        try:
            with mock.patch.dict(os.environ, {"LINKDAPI_MAX_RETRIES": "7"}):
                get_settings.cache_clear()
                assert get_settings().max_retries == 7
        finally:
            get_settings.cache_clear()
