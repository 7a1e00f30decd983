"""Data models for configuration settings."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from appconfig.features.http.errors import DecodeError


class ConfigurationSetting(BaseModel):
    """A key-value entry stored in the configuration service.

    Instances are only created by decoding a service response and are never
    mutated; a refreshed value is a new instance.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str = Field(min_length=1, description="Setting key")
    label: str | None = Field(
        default=None, description="Secondary dimension for same-key entries"
    )
    content_type: str | None = Field(default=None, description="Value media type")
    value: str = Field(description="Setting payload")
    last_modified: str = Field(description="Last modification timestamp")
    locked: bool = Field(description="Whether the setting is read-only")
    tags: dict[str, str] = Field(description="Free-form tags")
    etag: str = Field(min_length=1, description="Revision token")

    @classmethod
    def from_json(cls, body: bytes) -> "ConfigurationSetting":
        """Decode a setting from a JSON response body.

        Args:
            body: Raw response body.

        Returns:
            Decoded setting.

        Raises:
            DecodeError: If the body is not JSON or lacks a required field.
        """
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            msg = f"Response body is not a configuration setting: {e}"
            raise DecodeError(msg) from e
