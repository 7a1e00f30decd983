"""Domain exceptions for the App Configuration client.

Every failure raised by signing, transport or decoding derives from
``AppConfigurationError`` so callers can handle the client's errors with a
single ``except`` clause while still distinguishing the cause.
"""

from enum import Enum


class AppConfigurationError(Exception):
    """Base exception for all client errors."""


class SigningError(AppConfigurationError):
    """Request could not be signed.

    Raised for a secret that is not valid base64 (or decodes to nothing) and
    for HMAC key construction failures. The request is never sent.
    """


class TransportErrorClass(str, Enum):
    """Classification of transport failures.

    - NETWORK_TIMEOUT: Request timed out
    - CONNECTION_ERROR: Could not establish connection
    - HTTP_4XX: Client error status
    - HTTP_5XX: Server error status
    - UNEXPECTED_STATUS: Informational or redirect status other than 304
    - UNKNOWN: Unclassified httpx failure
    """

    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    HTTP_4XX = "HTTP_4XX"
    HTTP_5XX = "HTTP_5XX"
    UNEXPECTED_STATUS = "UNEXPECTED_STATUS"
    UNKNOWN = "UNKNOWN"


class TransportError(AppConfigurationError):
    """Network failure or a status other than 2xx/304.

    Attributes:
        error_class: Classification of the failure.
        status_code: HTTP status code, or None when no response arrived.
    """

    def __init__(
        self,
        message: str,
        error_class: TransportErrorClass,
        status_code: int | None = None,
    ) -> None:
        """Initialize the transport error.

        Args:
            message: Human-readable error message.
            error_class: Classification of the failure.
            status_code: HTTP status code if a response was received.
        """
        super().__init__(message)
        self.error_class = error_class
        self.status_code = status_code


class NotFoundError(TransportError):
    """The service reported 404 for the requested setting."""

    def __init__(self, path: str) -> None:
        """Initialize the error with the missing resource path.

        Args:
            path: Request path that was not found.
        """
        self.path = path
        super().__init__(
            f"Resource not found: {path}",
            error_class=TransportErrorClass.HTTP_4XX,
            status_code=404,
        )


class DecodeError(AppConfigurationError):
    """Response body does not match the expected record shape."""
