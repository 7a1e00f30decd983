"""Protocol interfaces for the HTTP transport and request signing."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from appconfig.features.http.models import HttpResponse
from appconfig.features.http.signing import SignedHeaders


@runtime_checkable
class HttpTransport(Protocol):
    """Transport capable of issuing a GET against the configuration service.

    ``ConfigurationFetcher`` depends only on this method, so tests can pass
    a fake that records the exact request it received.
    """

    async def get(
        self,
        path: str,
        query_params: Sequence[tuple[str, str]] | None = None,
        headers: Sequence[tuple[str, str]] | None = None,
    ) -> HttpResponse:
        """Issue a GET request.

        Args:
            path: Request path, e.g. ``/kv/my-key``.
            query_params: Ordered query parameters, excluding api-version.
            headers: Extra request headers.

        Returns:
            Response with a 2xx or 304 status.

        Raises:
            TransportError: On network failure or any other status.
            SigningError: If the request could not be signed.
        """
        ...


@runtime_checkable
class RequestSigningScheme(Protocol):
    """Anything that can produce the signed headers for a request."""

    def sign_request(
        self,
        method: str,
        host: str,
        url: str,
        body: bytes | None = None,
    ) -> SignedHeaders:
        """Compute signed headers for one request."""
        ...
