"""URL canonicalization for request signing."""

_HTTP_PREFIX = "http://"
_HTTPS_PREFIX = "https://"


def get_path_and_query(url: str, host: str) -> str:
    """Return the path and query of an absolute URL as sent on the wire.

    The scheme is folded to ``https`` before it is stripped, so ``http`` and
    ``https`` URLs for the same resource canonicalize identically. Only the
    leading scheme and host are removed; a host string that recurs later in
    the path or query is left intact.

    Args:
        url: Absolute request URL.
        host: Host (with port, if any) the request is addressed to.

    Returns:
        Path plus query string, or ``/`` when the URL has neither.

    Examples:
        >>> get_path_and_query("https://example.com/kv/a?api-version=1.0", "example.com")
        '/kv/a?api-version=1.0'
        >>> get_path_and_query("http://example.com", "example.com")
        '/'
    """
    if url.startswith(_HTTP_PREFIX):
        url = _HTTPS_PREFIX + url[len(_HTTP_PREFIX) :]

    remainder = url.removeprefix(_HTTPS_PREFIX).removeprefix(host)
    return remainder or "/"
