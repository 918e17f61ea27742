"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

import core.config as config_module
from core.config import (
    AppSettings,
    SubmitterSettings,
    describe_settings,
    mask_secret,
    write_user_env_vars,
)


class TestAppSettings:
    """Connection settings come from ISSUETRAK_* variables and have no defaults."""

    def test_reads_environment(self, monkeypatch):
        """Should read URL, version and key from the environment."""
        monkeypatch.setenv("ISSUETRAK_BASE_API_URL", "http://local.issuetrakapi.com")
        monkeypatch.setenv("ISSUETRAK_API_VERSION", "1")
        monkeypatch.setenv("ISSUETRAK_API_KEY", "API_KEY_HERE")

        settings = AppSettings()

        assert settings.base_api_url == "http://local.issuetrakapi.com"
        assert settings.api_version == 1
        assert settings.api_key == "API_KEY_HERE"
        assert settings.open_viewer is True

    def test_missing_settings_raise(self):
        """Should fail at construction when nothing is configured."""
        with pytest.raises(ValidationError) as exc_info:
            AppSettings()

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"base_api_url", "api_version", "api_key"}

    def test_non_numeric_version_raises(self, monkeypatch):
        """Should reject an API version that is not a number."""
        monkeypatch.setenv("ISSUETRAK_BASE_API_URL", "http://local.issuetrakapi.com")
        monkeypatch.setenv("ISSUETRAK_API_VERSION", "one")
        monkeypatch.setenv("ISSUETRAK_API_KEY", "key")

        with pytest.raises(ValidationError):
            AppSettings()

    @pytest.mark.parametrize("url", ["not a url", "local.issuetrakapi.com", "ftp://issuetrak.test"])
    def test_malformed_base_url_raises(self, url):
        """Should fail at construction instead of on the first request."""
        with pytest.raises(ValidationError) as exc_info:
            AppSettings(base_api_url=url, api_version=1, api_key="key")

        assert [error["loc"][0] for error in exc_info.value.errors()] == ["base_api_url"]

    def test_base_url_is_kept_as_given(self):
        settings = AppSettings(base_api_url="http://localhost:8080/issuetrak", api_version=1, api_key="key")

        assert settings.base_api_url == "http://localhost:8080/issuetrak"

    def test_settings_are_read_only(self, settings):
        """Should not allow settings to change after loading."""
        with pytest.raises(ValidationError):
            settings.api_key = "other"

    def test_reads_dotenv_file(self, tmp_path):
        """Should read values from an explicit .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "ISSUETRAK_BASE_API_URL=http://from-file\nISSUETRAK_API_VERSION=2\nISSUETRAK_API_KEY=k\n",
            encoding="utf-8",
        )

        settings = AppSettings(_env_file=env_file)

        assert settings.base_api_url == "http://from-file"
        assert settings.api_version == 2


class TestSubmitterSettings:
    def test_reads_alternate_keys(self, monkeypatch):
        """Should read url/api_version/api_key/username."""
        monkeypatch.setenv("ISSUETRAK_URL", "http://issuetrak.test")
        monkeypatch.setenv("ISSUETRAK_API_VERSION", "1")
        monkeypatch.setenv("ISSUETRAK_API_KEY", "key")
        monkeypatch.setenv("ISSUETRAK_USERNAME", "jdoe")

        settings = SubmitterSettings()

        assert settings.url == "http://issuetrak.test"
        assert settings.username == "jdoe"

    def test_malformed_url_raises(self, monkeypatch):
        monkeypatch.setenv("ISSUETRAK_URL", "not a url")
        monkeypatch.setenv("ISSUETRAK_API_VERSION", "1")
        monkeypatch.setenv("ISSUETRAK_API_KEY", "key")
        monkeypatch.setenv("ISSUETRAK_USERNAME", "jdoe")

        with pytest.raises(ValidationError):
            SubmitterSettings()

    def test_username_is_required(self, monkeypatch):
        monkeypatch.setenv("ISSUETRAK_URL", "http://issuetrak.test")
        monkeypatch.setenv("ISSUETRAK_API_VERSION", "1")
        monkeypatch.setenv("ISSUETRAK_API_KEY", "key")

        with pytest.raises(ValidationError):
            SubmitterSettings()


class TestUserEnvFile:
    def test_write_creates_file(self, tmp_path):
        """Should create the file and its directory."""
        env_path = tmp_path / "config" / ".env"

        written = write_user_env_vars({"ISSUETRAK_API_KEY": "abc"}, env_path)

        assert written == env_path
        assert "ISSUETRAK_API_KEY=abc" in env_path.read_text(encoding="utf-8")

    def test_write_merges_existing_values(self, tmp_path):
        """Should update given keys and keep the others."""
        env_path = tmp_path / ".env"
        env_path.write_text("# comment\nISSUETRAK_API_KEY=old\nOTHER='kept'\n", encoding="utf-8")

        write_user_env_vars({"ISSUETRAK_API_KEY": "new", "ISSUETRAK_API_VERSION": "1"}, env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert "ISSUETRAK_API_KEY=new" in lines
        assert "ISSUETRAK_API_VERSION=1" in lines
        assert "OTHER=kept" in lines
        assert "ISSUETRAK_API_KEY=old" not in lines

    def test_default_location_uses_user_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config_module, "get_user_config_dir", lambda: tmp_path / "user")

        written = write_user_env_vars({"ISSUETRAK_USERNAME": "jdoe"})

        assert written == tmp_path / "user" / ".env"


class TestDescribeSettings:
    def test_masks_api_key(self, settings):
        """Should never display the full API key."""
        rows = dict(describe_settings(settings))

        assert rows["ISSUETRAK_API_KEY"] == "******-key"
        assert rows["ISSUETRAK_BASE_API_URL"] == "http://issuetrak.test"
        assert "secret-key" not in rows.values()

    @pytest.mark.parametrize(
        "value, expected",
        [("abc", "***"), ("abcd", "****"), ("abcdef", "**cdef")],
    )
    def test_mask_secret(self, value, expected):
        assert mask_secret(value) == expected
