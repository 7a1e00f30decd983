"""Request signing applied as an httpx authentication flow."""

from collections.abc import Generator

import httpx

from appconfig.features.http.errors import SigningError
from appconfig.features.http.metrics import HttpMetrics
from appconfig.features.http.protocols import RequestSigningScheme


class SigningMiddleware(httpx.Auth):
    """Signs every request immediately before it is sent.

    The flow runs after httpx has assembled the final URL and headers, so
    the signature always covers what actually goes on the wire. Existing
    headers are kept; only x-ms-date, x-ms-content-sha256 and Authorization
    are added or overwritten.
    """

    requires_request_body = False
    requires_response_body = False

    def __init__(self, signer: RequestSigningScheme) -> None:
        """Initialize the middleware.

        Args:
            signer: Signing scheme used to compute the auth headers.
        """
        self._signer = signer

    def sign(self, request: httpx.Request) -> httpx.Request:
        """Inject signed headers into a request.

        Args:
            request: Outbound request. Its body is not signed.

        Returns:
            The same request carrying the signed headers.

        Raises:
            SigningError: If the signer rejects its key material.
        """
        # netloc keeps a non-default port, matching the Host header
        host = request.url.netloc.decode("ascii")
        # raw_path is the request target as sent: path and query, no fragment
        target = request.url.raw_path.decode("ascii")
        url = f"{request.url.scheme}://{host}{target}"
        try:
            signed = self._signer.sign_request(request.method, host, url)
        except SigningError:
            HttpMetrics.get_instance().record_signing_failure()
            raise

        for name, value in signed.as_dict().items():
            request.headers[name] = value
        return request

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        """Yield the signed request to httpx for sending."""
        yield self.sign(request)
