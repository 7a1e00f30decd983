"""HTTP and signing constants for the App Configuration transport.

Centralizes wire-level literals so the signer, middleware and client agree
on a single definition.
"""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_NOT_MODIFIED = 304
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_SERVER_ERROR_MIN = 500
HTTP_STATUS_SERVER_ERROR_MAX = 600

# Query string
API_VERSION_PARAM = "api-version"

# Signed request headers
HEADER_DATE = "x-ms-date"
HEADER_CONTENT_SHA256 = "x-ms-content-sha256"
HEADER_AUTHORIZATION = "Authorization"
HEADER_IF_NONE_MATCH = "If-None-Match"

SIGNATURE_ALGORITHM = "HMAC-SHA256"
SIGNED_HEADER_NAMES = "x-ms-date;host;x-ms-content-sha256"

# base64(SHA-256(b"")). Sent whenever a request carries no body; sibling
# clients in other languages hash "undefined" to this same value.
EMPTY_CONTENT_SHA256 = "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
