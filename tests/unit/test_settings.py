"""Unit tests for environment settings."""

import pytest

from appconfig.settings import AppSettings, SettingsError
from tests.helpers.signing import TEST_CREDENTIAL, TEST_HOST, TEST_SECRET


ENV_VARS = (
    "APPCONFIG_CONNECTION_STRING",
    "APPCONFIG_HOST",
    "APPCONFIG_CREDENTIAL",
    "APPCONFIG_SECRET",
    "APPCONFIG_API_VERSION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove client variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    """Tests for AppSettings.to_http_config."""

    def test_individual_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test host, credential and secret variables build a config."""
        monkeypatch.setenv("APPCONFIG_HOST", TEST_HOST)
        monkeypatch.setenv("APPCONFIG_CREDENTIAL", TEST_CREDENTIAL)
        monkeypatch.setenv("APPCONFIG_SECRET", TEST_SECRET)
        monkeypatch.setenv("APPCONFIG_API_VERSION", "2.0")

        config = AppSettings(_env_file=None).to_http_config()

        assert config.host == TEST_HOST
        assert config.credential == TEST_CREDENTIAL
        assert config.secret == TEST_SECRET
        assert config.api_version == "2.0"

    def test_connection_string_takes_precedence(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the connection string wins over individual variables."""
        monkeypatch.setenv(
            "APPCONFIG_CONNECTION_STRING",
            f"Endpoint=https://{TEST_HOST};Id={TEST_CREDENTIAL};Secret={TEST_SECRET}",
        )
        monkeypatch.setenv("APPCONFIG_HOST", "other.example.com")

        config = AppSettings(_env_file=None).to_http_config()

        assert config.host == TEST_HOST

    def test_missing_variables_raise(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test missing variables are named in the error."""
        monkeypatch.setenv("APPCONFIG_HOST", TEST_HOST)

        with pytest.raises(SettingsError, match="APPCONFIG_CREDENTIAL, APPCONFIG_SECRET"):
            AppSettings(_env_file=None).to_http_config()

    def test_invalid_connection_string_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a bad connection string raises SettingsError."""
        monkeypatch.setenv("APPCONFIG_CONNECTION_STRING", "Endpoint=nowhere")

        with pytest.raises(SettingsError, match="APPCONFIG_CONNECTION_STRING"):
            AppSettings(_env_file=None).to_http_config()

    def test_invalid_host_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a URL in APPCONFIG_HOST raises SettingsError."""
        monkeypatch.setenv("APPCONFIG_HOST", f"https://{TEST_HOST}")
        monkeypatch.setenv("APPCONFIG_CREDENTIAL", TEST_CREDENTIAL)
        monkeypatch.setenv("APPCONFIG_SECRET", TEST_SECRET)

        with pytest.raises(SettingsError, match="Invalid endpoint settings"):
            AppSettings(_env_file=None).to_http_config()
