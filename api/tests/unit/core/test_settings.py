"""Unit tests for application settings."""

import pytest

from newsdesk.config.settings import Environment, Settings, get_settings


@pytest.mark.unit
class TestSettings:
    """Test settings defaults and environment parsing."""

    def test_defaults(self):
        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.default_items_per_page == 10
        assert settings.maximum_number_of_links == 10
        assert settings.redis_url == "redis://redis:6379/0"

    def test_redis_url_from_components(self, monkeypatch):
        monkeypatch.setenv("REDIS_HOST", "cache")
        monkeypatch.setenv("REDIS_PASSWORD", "secret")
        monkeypatch.setenv("REDIS_DB", "2")

        assert Settings().redis_url == "redis://:secret@cache:6379/2"

    def test_explicit_redis_url_wins(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://elsewhere:6380/1")

        assert Settings().redis_url == "redis://elsewhere:6380/1"

    def test_comma_separated_lists(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
        monkeypatch.setenv("LOADED_EXTENSIONS", "News, Calendar,,")

        settings = Settings()

        assert settings.allowed_origin_list == ["https://a.example", "https://b.example"]
        assert settings.loaded_extension_keys == {"news", "calendar"}

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
