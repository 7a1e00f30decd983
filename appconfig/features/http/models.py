"""Data models for the HTTP transport."""

from pydantic import BaseModel, ConfigDict, Field

from appconfig.features.http.constants import (
    HTTP_STATUS_NOT_MODIFIED,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
)


class HttpResponse(BaseModel):
    """Response returned by the transport.

    Only 2xx and 304 responses are represented; every other status is raised
    as a ``TransportError``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(ge=100, le=599, description="HTTP status code")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Response headers"
    )
    body_bytes: bytes = Field(default=b"", description="Response body")

    @property
    def is_success(self) -> bool:
        """Check if the response has a 2xx status."""
        return HTTP_STATUS_OK_MIN <= self.status_code < HTTP_STATUS_OK_MAX

    @property
    def is_not_modified(self) -> bool:
        """Check if the server answered 304 Not Modified."""
        return self.status_code == HTTP_STATUS_NOT_MODIFIED

    @property
    def body_size(self) -> int:
        """Get the size of the response body in bytes."""
        return len(self.body_bytes)
