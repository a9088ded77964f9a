"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Kosync API"
        assert settings.debug is False
        assert settings.port == 7200
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"
        assert settings.api_prefix == ""
        assert settings.store_backend == "memory"
        assert settings.cors_origins == []

    def test_loads_from_prefixed_env(self):
        """Settings should load from KOSYNC_ environment variables."""
        with patch.dict(os.environ, {"KOSYNC_DEBUG": "true", "KOSYNC_PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables belong to other programs."""
        with patch.dict(os.environ, {"PORT": "9999"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.port == 7200

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "KOSYNC_STORE_BACKEND": "supabase",
            "KOSYNC_SUPABASE_URL": "https://test.supabase.co",
            "KOSYNC_SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.store_backend == "supabase"
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.supabase_users_table == "kosync_users"
            assert settings.supabase_progress_table == "kosync_progress"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
