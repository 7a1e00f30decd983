"""HMAC-SHA256 request signing for the App Configuration service.

The service authenticates every request by recomputing an HMAC over a
canonical string built from the method, path and query, date, host and
content hash. The layout of that string and of the Authorization header is
fixed by the remote verifier and must be reproduced byte for byte.
"""

import base64
import binascii
import hashlib
import hmac
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import format_datetime

import structlog

from appconfig.features.http.constants import (
    EMPTY_CONTENT_SHA256,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_SHA256,
    HEADER_DATE,
    SIGNATURE_ALGORITHM,
    SIGNED_HEADER_NAMES,
)
from appconfig.features.http.errors import SigningError
from appconfig.features.http.url import get_path_and_query


logger = structlog.get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class SignedHeaders:
    """Headers produced by one signing invocation.

    Attributes:
        x_ms_date: Request date, RFC 2822 with a GMT suffix.
        x_ms_content_sha256: Base64 SHA-256 of the request body.
        authorization: Authorization header value.
    """

    x_ms_date: str
    x_ms_content_sha256: str
    authorization: str

    def as_dict(self) -> dict[str, str]:
        """Return the headers keyed by their wire names."""
        return {
            HEADER_DATE: self.x_ms_date,
            HEADER_CONTENT_SHA256: self.x_ms_content_sha256,
            HEADER_AUTHORIZATION: self.authorization,
        }


def format_request_date(moment: datetime) -> str:
    """Format a timestamp for the x-ms-date header.

    Args:
        moment: Aware datetime; converted to UTC before formatting.

    Returns:
        RFC 2822 date ending in ``GMT``, e.g. ``Wed, 01 Jan 2020 00:00:00 GMT``.
    """
    return format_datetime(moment.astimezone(UTC), usegmt=True)


def compute_content_hash(body: bytes | None) -> str:
    """Return the base64 SHA-256 of a request body.

    A missing body hashes to the fixed empty-content constant.
    """
    if body is None:
        return EMPTY_CONTENT_SHA256
    return base64.b64encode(hashlib.sha256(body).digest()).decode("ascii")


def build_string_to_sign(
    method: str,
    path_and_query: str,
    date: str,
    host: str,
    content_hash: str,
) -> str:
    """Build the canonical string covered by the signature.

    Format: ``METHOD\\nPATH_AND_QUERY\\nDATE;HOST;CONTENT_HASH``.
    """
    return f"{method}\n{path_and_query}\n{date};{host};{content_hash}"


def decode_secret(secret: str) -> bytes:
    """Decode base64 key material.

    Args:
        secret: Base64-encoded secret.

    Returns:
        Raw key bytes.

    Raises:
        SigningError: If the secret is not valid base64 or decodes to nothing.
    """
    try:
        key = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        msg = f"Secret is not valid base64: {e}"
        raise SigningError(msg) from e

    if not key:
        msg = "Secret decodes to an empty key"
        raise SigningError(msg)
    return key


class RequestSigner:
    """Signs outbound requests with a shared HMAC-SHA256 secret.

    Holds the credential/secret pair read-only; ``sign_request`` keeps no
    state between calls and is safe to use from concurrent tasks.
    """

    def __init__(
        self,
        credential: str,
        secret: str,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the signer.

        Args:
            credential: Public identifier of the signing key.
            secret: Base64-encoded key material.
            clock: Source of the current UTC time. Defaults to the wall clock.
        """
        self._credential = credential
        self._secret = secret
        self._clock = clock or utc_now

    @property
    def credential(self) -> str:
        """Get the credential identifier."""
        return self._credential

    def sign_request(
        self,
        method: str,
        host: str,
        url: str,
        body: bytes | None = None,
    ) -> SignedHeaders:
        """Compute the signed headers for one request.

        Args:
            method: HTTP method, e.g. ``GET``.
            host: Host the request is addressed to (as in the Host header).
            url: Absolute request URL including the query string.
            body: Raw request body, or None when the request has none.

        Returns:
            SignedHeaders carrying date, content hash and authorization.

        Raises:
            SigningError: If the secret is invalid or the HMAC key is rejected.
        """
        path_and_query = get_path_and_query(url, host)
        key = decode_secret(self._secret)

        # Read once: the header and the string-to-sign must carry the same date.
        date = format_request_date(self._clock())
        content_hash = compute_content_hash(body)

        string_to_sign = build_string_to_sign(
            method, path_and_query, date, host, content_hash
        )

        try:
            mac = hmac.new(key, string_to_sign.encode("utf-8"), hashlib.sha256)
        except (TypeError, ValueError) as e:
            msg = f"Invalid HMAC key: {e}"
            raise SigningError(msg) from e

        signature = base64.b64encode(mac.digest()).decode("ascii")

        logger.debug(
            "request_signed",
            component="http",
            subcomponent="signing",
            method=method,
            host=host,
            path_and_query=path_and_query,
            credential=self._credential,
        )

        return SignedHeaders(
            x_ms_date=date,
            x_ms_content_sha256=content_hash,
            authorization=(
                f"{SIGNATURE_ALGORITHM} Credential={self._credential}"
                f"&SignedHeaders={SIGNED_HEADER_NAMES}"
                f"&Signature={signature}"
            ),
        )
