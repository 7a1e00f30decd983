"""Signed async HTTP client for the App Configuration service."""

import time
from collections.abc import Sequence
from types import TracebackType

import httpx
import structlog

from appconfig.features.config.schemas.http import HttpConfig
from appconfig.features.http.constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_NOT_MODIFIED,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    HTTP_STATUS_SERVER_ERROR_MAX,
    HTTP_STATUS_SERVER_ERROR_MIN,
)
from appconfig.features.http.errors import (
    NotFoundError,
    TransportError,
    TransportErrorClass,
)
from appconfig.features.http.metrics import HttpMetrics
from appconfig.features.http.middleware import SigningMiddleware
from appconfig.features.http.models import HttpResponse
from appconfig.features.http.query import QueryStringBuilder
from appconfig.features.http.redact import redact_headers
from appconfig.features.http.signing import Clock, RequestSigner


logger = structlog.get_logger()


class SignedHttpClient:
    """HTTP transport that signs every request with the configured secret.

    Provides GET operations with:
    - api-version appended as the last query parameter
    - HMAC signing through ``SigningMiddleware``
    - Typed errors for network failures and unexpected statuses
    - Metrics collection and structured logging

    Reuses a single ``httpx.AsyncClient`` for connection pooling; close it
    with ``aclose()`` or by using the client as an async context manager.
    """

    def __init__(
        self,
        config: HttpConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Endpoint, credential and api-version settings.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
            clock: Optional clock for the signer.
        """
        self._config = config
        self._transport = transport
        self._auth = SigningMiddleware(
            RequestSigner(config.credential, config.secret, clock=clock)
        )
        self._metrics = HttpMetrics.get_instance()
        self._client: httpx.AsyncClient | None = None
        self._log = logger.bind(component="http", host=config.host)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                auth=self._auth,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the pooled HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "SignedHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def build_url(
        self,
        path: str,
        query_params: Sequence[tuple[str, str]] | None = None,
    ) -> str:
        """Build the absolute request URL.

        Args:
            path: Request path beginning with ``/``.
            query_params: Ordered query parameters, excluding api-version.

        Returns:
            ``<scheme>://<host><path>?...&api-version=<version>``.
        """
        query_string = (
            QueryStringBuilder(self._config.api_version)
            .add_params(query_params or [])
            .build()
        )
        return f"{self._config.scheme}://{self._config.host}{path}{query_string}"

    async def get(
        self,
        path: str,
        query_params: Sequence[tuple[str, str]] | None = None,
        headers: Sequence[tuple[str, str]] | None = None,
    ) -> HttpResponse:
        """Issue a signed GET request.

        Args:
            path: Request path, e.g. ``/kv/my-key``.
            query_params: Ordered query parameters, excluding api-version.
            headers: Extra request headers.

        Returns:
            HttpResponse for 2xx and 304 statuses.

        Raises:
            NotFoundError: If the service answered 404.
            TransportError: On network failure or any other non-2xx status.
            SigningError: If the request could not be signed.
        """
        url = self.build_url(path, query_params)
        log = self._log.bind(path=path)
        start_time_ns = time.perf_counter_ns()

        try:
            response = await self._get_client().get(url, headers=dict(headers or []))
        except httpx.TimeoutException as e:
            raise self._failure(
                TransportErrorClass.NETWORK_TIMEOUT, f"Request timed out: {e}"
            ) from e
        except httpx.ConnectError as e:
            raise self._failure(
                TransportErrorClass.CONNECTION_ERROR, f"Connection failed: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise self._failure(
                TransportErrorClass.UNKNOWN, f"Unexpected error: {e}"
            ) from e

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        body = response.content
        self._metrics.record_response(response.status_code, len(body), duration_ms)

        log.debug(
            "request_headers",
            headers=redact_headers(dict(response.request.headers)),
        )
        log.info(
            "request_complete",
            status_code=response.status_code,
            bytes=len(body),
            duration_ms=round(duration_ms, 2),
        )

        if response.status_code == HTTP_STATUS_NOT_MODIFIED:
            return HttpResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
            )

        error = self._classify_status(response.status_code, path)
        if error is not None:
            self._metrics.record_failure(error.error_class)
            raise error

        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body_bytes=body,
        )

    def _failure(
        self, error_class: TransportErrorClass, message: str
    ) -> TransportError:
        """Record and build a transport error for a request with no response."""
        self._metrics.record_failure(error_class)
        return TransportError(message, error_class=error_class)

    def _classify_status(self, status_code: int, path: str) -> TransportError | None:
        """Classify a response status.

        Args:
            status_code: HTTP status code (304 is handled by the caller).
            path: Request path, used in the not-found message.

        Returns:
            TransportError for anything other than 2xx, None otherwise.
        """
        if HTTP_STATUS_OK_MIN <= status_code < HTTP_STATUS_OK_MAX:
            return None

        if status_code == HTTP_STATUS_NOT_FOUND:
            return NotFoundError(path)

        if HTTP_STATUS_BAD_REQUEST <= status_code < HTTP_STATUS_SERVER_ERROR_MIN:
            return TransportError(
                f"Client error ({status_code})",
                error_class=TransportErrorClass.HTTP_4XX,
                status_code=status_code,
            )

        if HTTP_STATUS_SERVER_ERROR_MIN <= status_code < HTTP_STATUS_SERVER_ERROR_MAX:
            return TransportError(
                f"Server error ({status_code})",
                error_class=TransportErrorClass.HTTP_5XX,
                status_code=status_code,
            )

        return TransportError(
            f"Unexpected status ({status_code})",
            error_class=TransportErrorClass.UNEXPECTED_STATUS,
            status_code=status_code,
        )
