"""Signed HTTP transport for the App Configuration service.

This module provides:
- URL canonicalization and query string construction
- HMAC-SHA256 request signing and the httpx signing middleware
- An async client with typed errors, metrics and header redaction
"""

from appconfig.features.http.client import SignedHttpClient
from appconfig.features.http.constants import (
    API_VERSION_PARAM,
    EMPTY_CONTENT_SHA256,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_SHA256,
    HEADER_DATE,
    HEADER_IF_NONE_MATCH,
    HTTP_STATUS_NOT_MODIFIED,
    SIGNED_HEADER_NAMES,
)
from appconfig.features.http.errors import (
    AppConfigurationError,
    DecodeError,
    NotFoundError,
    SigningError,
    TransportError,
    TransportErrorClass,
)
from appconfig.features.http.metrics import HttpMetrics
from appconfig.features.http.middleware import SigningMiddleware
from appconfig.features.http.models import HttpResponse
from appconfig.features.http.protocols import HttpTransport, RequestSigningScheme
from appconfig.features.http.query import QueryStringBuilder
from appconfig.features.http.redact import redact_headers, redact_secret
from appconfig.features.http.signing import RequestSigner, SignedHeaders
from appconfig.features.http.url import get_path_and_query


__all__ = [
    # Client
    "SignedHttpClient",
    "HttpTransport",
    "HttpResponse",
    # Signing
    "RequestSigner",
    "RequestSigningScheme",
    "SignedHeaders",
    "SigningMiddleware",
    "QueryStringBuilder",
    "get_path_and_query",
    # Errors
    "AppConfigurationError",
    "SigningError",
    "TransportError",
    "TransportErrorClass",
    "NotFoundError",
    "DecodeError",
    # Constants
    "API_VERSION_PARAM",
    "EMPTY_CONTENT_SHA256",
    "HEADER_AUTHORIZATION",
    "HEADER_CONTENT_SHA256",
    "HEADER_DATE",
    "HEADER_IF_NONE_MATCH",
    "HTTP_STATUS_NOT_MODIFIED",
    "SIGNED_HEADER_NAMES",
    # Metrics
    "HttpMetrics",
    # Redaction
    "redact_headers",
    "redact_secret",
]
