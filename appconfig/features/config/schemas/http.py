"""Pydantic schemas for the client configuration file."""

from typing import Annotated, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appconfig.features.config.constants import (
    CONNECTION_STRING_ENDPOINT,
    CONNECTION_STRING_ID,
    CONNECTION_STRING_SECRET,
    DEFAULT_API_VERSION,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT_SECONDS,
)


class HttpConfig(BaseModel):
    """Endpoint and credentials for the signed HTTP client.

    The secret is excluded from ``repr`` so the model can be logged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: Annotated[
        str, Field(min_length=1, description="Service host, optionally with port")
    ]
    credential: Annotated[
        str, Field(min_length=1, description="Identifier of the signing key")
    ]
    secret: Annotated[
        str, Field(min_length=1, repr=False, description="Base64 signing key")
    ]
    api_version: Annotated[str, Field(min_length=1)] = DEFAULT_API_VERSION
    scheme: Literal["https", "http"] = DEFAULT_SCHEME
    timeout_seconds: Annotated[float, Field(gt=0.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Ensure host is a bare authority, not a URL."""
        v = v.strip()
        if "://" in v or "/" in v:
            msg = f"Host must not include a scheme or path: {v!r}"
            raise ValueError(msg)
        return v

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        api_version: str = DEFAULT_API_VERSION,
    ) -> "HttpConfig":
        """Build a config from an ``Endpoint=...;Id=...;Secret=...`` string.

        Args:
            connection_string: Connection string as issued by the service.
            api_version: api-version to send with every request.

        Returns:
            HttpConfig for the endpoint.

        Raises:
            ValueError: If a segment is malformed or missing.
        """
        parts: dict[str, str] = {}
        for segment in connection_string.strip().split(";"):
            if not segment:
                continue
            name, sep, value = segment.partition("=")
            if not sep:
                msg = f"Malformed connection string segment: {name!r}"
                raise ValueError(msg)
            parts[name.strip()] = value.strip()

        required = (
            CONNECTION_STRING_ENDPOINT,
            CONNECTION_STRING_ID,
            CONNECTION_STRING_SECRET,
        )
        missing = [name for name in required if not parts.get(name)]
        if missing:
            msg = f"Connection string is missing: {', '.join(missing)}"
            raise ValueError(msg)

        endpoint = urlparse(parts[CONNECTION_STRING_ENDPOINT])
        if endpoint.scheme not in ("http", "https") or not endpoint.netloc:
            msg = f"Invalid endpoint: {parts[CONNECTION_STRING_ENDPOINT]!r}"
            raise ValueError(msg)

        return cls(
            host=endpoint.netloc,
            credential=parts[CONNECTION_STRING_ID],
            secret=parts[CONNECTION_STRING_SECRET],
            api_version=api_version,
            scheme=endpoint.scheme,
        )


class AppConfigurationConfig(BaseModel):
    """Root document of the client configuration file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    http_config: HttpConfig = Field(description="Signed HTTP client settings")
