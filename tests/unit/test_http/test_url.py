"""Unit tests for URL canonicalization."""

import pytest

from appconfig.features.http.url import get_path_and_query


HOST = "www.example.com"


class TestGetPathAndQuery:
    """Tests for get_path_and_query function."""

    def test_returns_slash_for_root(self) -> None:
        """Test a URL with no path canonicalizes to a single slash."""
        assert get_path_and_query(f"https://{HOST}", HOST) == "/"

    def test_returns_slash_for_root_over_http(self) -> None:
        """Test the root of an http URL is also a single slash."""
        assert get_path_and_query(f"http://{HOST}", HOST) == "/"

    def test_returns_path_without_query(self) -> None:
        """Test a path with no query string is returned as-is."""
        result = get_path_and_query(f"https://{HOST}/test/path", HOST)
        assert result == "/test/path"

    def test_includes_query(self) -> None:
        """Test the query string is kept after the path."""
        result = get_path_and_query(
            f"https://{HOST}/test/path?foo=bar&api-version=1.0", HOST
        )
        assert result == "/test/path?foo=bar&api-version=1.0"

    def test_keeps_root_slash_before_query(self) -> None:
        """Test a root path with a query keeps both."""
        assert get_path_and_query(f"https://{HOST}/?x=1", HOST) == "/?x=1"

    @pytest.mark.parametrize(
        "path",
        ["", "/", "/a/b", "/a/b?x=1", "/kv/Azure:IntervalSecs?api-version=1.0"],
    )
    def test_scheme_does_not_affect_result(self, path: str) -> None:
        """Test http and https URLs canonicalize identically."""
        assert get_path_and_query(f"http://{HOST}{path}", HOST) == (
            get_path_and_query(f"https://{HOST}{path}", HOST)
        )

    def test_host_with_port(self) -> None:
        """Test a host carrying a port is stripped in full."""
        result = get_path_and_query("http://127.0.0.1:8080/kv/a", "127.0.0.1:8080")
        assert result == "/kv/a"

    def test_host_recurring_in_path_is_preserved(self) -> None:
        """Test only the leading host is removed when it recurs in the path."""
        url = f"https://{HOST}/proxy/{HOST}/config?target=https://{HOST}"
        result = get_path_and_query(url, HOST)
        assert result == f"/proxy/{HOST}/config?target=https://{HOST}"

    def test_scheme_inside_query_is_preserved(self) -> None:
        """Test a URL-valued query parameter is not rewritten."""
        url = f"https://{HOST}/kv/a?next=http://other.example.com/"
        result = get_path_and_query(url, HOST)
        assert result == "/kv/a?next=http://other.example.com/"
