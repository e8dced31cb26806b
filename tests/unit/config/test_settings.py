"""Tests for gateway settings."""

from pydantic import SecretStr

from vodgate_config import clear_settings_cache, get_settings
from vodgate_config.settings import Settings


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.sites_json is None
        assert settings.remote_db_url is None
        assert settings.search_timeout_seconds == 8.0
        assert settings.tmdb_proxy_url == ""
        assert settings.tmdb_enabled is False
        assert settings.require_password is False


class TestEnvironment:
    """Tests for environment variable loading."""

    def test_reads_deployment_variable_names(self, monkeypatch):
        monkeypatch.setenv("SITES_JSON", '{"sites": []}')
        monkeypatch.setenv("REMOTE_DB_URL", "https://db.example/sites.json")
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("ACCESS_PASSWORD", "one,two")

        settings = Settings(_env_file=None)

        assert settings.sites_json == '{"sites": []}'
        assert settings.remote_db_url == "https://db.example/sites.json"
        assert settings.tmdb_enabled is True
        assert settings.accepted_passwords == ["one", "two"]
        assert settings.multi_user_mode is True

    def test_get_settings_is_cached_until_cleared(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        clear_settings_cache()

        assert get_settings() is not first


class TestSecrets:
    """Tests for secret handling."""

    def test_passwords_are_not_in_repr(self):
        settings = Settings(_env_file=None, access_password=SecretStr("hunter2"))

        assert "hunter2" not in repr(settings)
        assert "hunter2" not in str(settings.model_dump())

    def test_empty_entries_are_dropped(self):
        settings = Settings(_env_file=None, access_password=SecretStr(" , ,"))

        assert settings.accepted_passwords == []
        assert settings.require_password is False
