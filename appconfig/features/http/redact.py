"""Header redaction utilities for logging."""

# Headers that must never appear in logs
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
    }
)

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers for logging.

    Args:
        headers: Original headers dictionary.

    Returns:
        New dictionary with the Authorization value (and other credential
        headers) replaced by [REDACTED].
    """
    return {
        key: REDACTED_VALUE if is_sensitive_header(key) else value
        for key, value in headers.items()
    }


def is_sensitive_header(header_name: str) -> bool:
    """Check if a header name is sensitive."""
    return header_name.lower() in SENSITIVE_HEADERS


def redact_secret(secret: str, visible: int = 4) -> str:
    """Mask key material, keeping a short prefix for identification.

    Args:
        secret: Secret value to mask.
        visible: Number of leading characters to keep.

    Returns:
        Masked secret, or [REDACTED] when the secret is too short to show any.
    """
    if len(secret) <= visible * 2:
        return REDACTED_VALUE
    return f"{secret[:visible]}...{REDACTED_VALUE}"
