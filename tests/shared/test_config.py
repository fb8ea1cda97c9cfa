"""Tests for shared/config.py."""

import logging
import os
from unittest.mock import patch

from stripe_bindings.shared.config import Settings, get_settings, configure_logging


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.api_key == ""
        assert settings.api_base == "https://api.stripe.com"
        assert settings.api_version is None
        assert settings.timeout == 80.0
        assert settings.log_level == "WARNING"

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {
            "STRIPE_API_KEY": "sk_test_env",
            "STRIPE_API_VERSION": "2019-03-14",
            "STRIPE_TIMEOUT": "5",
        }):
            settings = Settings()
            assert settings.api_key == "sk_test_env"
            assert settings.api_version == "2019-03-14"
            assert settings.timeout == 5.0

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"API_KEY": "nope"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.api_key == ""


class TestGetSettings:
    def test_returns_cached_instance(self):
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Clearing the cache should pick up new environment values."""
        with patch.dict(os.environ, {"STRIPE_API_KEY": "sk_test_reload"}):
            get_settings.cache_clear()
            assert get_settings().api_key == "sk_test_reload"


class TestConfigureLogging:
    def test_sets_library_log_level(self):
        """Should apply the configured level to the package logger."""
        configure_logging(Settings(log_level="debug"))
        assert logging.getLogger("stripe_bindings").level == logging.DEBUG

        configure_logging(Settings(log_level="WARNING"))
        assert logging.getLogger("stripe_bindings").level == logging.WARNING
