"""Client settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from appconfig.features.config.constants import DEFAULT_API_VERSION
from appconfig.features.config.schemas.http import HttpConfig


class SettingsError(Exception):
    """Raised when the environment does not describe a usable endpoint."""


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    connection_string: str | None = Field(
        default=None, validation_alias="APPCONFIG_CONNECTION_STRING"
    )
    host: str | None = Field(default=None, validation_alias="APPCONFIG_HOST")
    credential: str | None = Field(
        default=None, validation_alias="APPCONFIG_CREDENTIAL"
    )
    secret: str | None = Field(
        default=None, validation_alias="APPCONFIG_SECRET", repr=False
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION, validation_alias="APPCONFIG_API_VERSION"
    )

    def to_http_config(self) -> HttpConfig:
        """Build the HTTP client config from the environment.

        A connection string takes precedence over the individual variables.

        Raises:
            SettingsError: If neither a connection string nor the host,
                credential and secret variables are set.
        """
        if self.connection_string:
            try:
                return HttpConfig.from_connection_string(
                    self.connection_string, api_version=self.api_version
                )
            except ValueError as e:
                msg = f"Invalid APPCONFIG_CONNECTION_STRING: {e}"
                raise SettingsError(msg) from e

        missing = [
            name
            for name, value in (
                ("APPCONFIG_HOST", self.host),
                ("APPCONFIG_CREDENTIAL", self.credential),
                ("APPCONFIG_SECRET", self.secret),
            )
            if not value
        ]
        if missing:
            msg = (
                "Set APPCONFIG_CONNECTION_STRING or all of: "
                f"{', '.join(missing)}"
            )
            raise SettingsError(msg)

        try:
            return HttpConfig(
                host=self.host,
                credential=self.credential,
                secret=self.secret,
                api_version=self.api_version,
            )
        except ValueError as e:
            msg = f"Invalid endpoint settings: {e}"
            raise SettingsError(msg) from e


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
