"""Query string construction with a trailing api-version parameter."""

from collections.abc import Iterable
from urllib.parse import quote

from appconfig.features.http.constants import API_VERSION_PARAM


class QueryStringBuilder:
    """Builds an ordered query string that always ends with api-version.

    The version pair is seeded at construction and re-appended after every
    addition, so there is exactly one version parameter and it is last.
    Parameters are rendered in insertion order with names and values
    percent-encoded, so "&", "=" and "#" inside a value stay part of it.
    """

    def __init__(self, api_version: str) -> None:
        """Initialize the builder.

        Args:
            api_version: Value of the mandatory api-version parameter.
        """
        self._params: list[tuple[str, str]] = [(API_VERSION_PARAM, api_version)]

    def add_param(self, key: str, value: str) -> "QueryStringBuilder":
        """Add a single parameter ahead of api-version."""
        return self.add_params([(key, value)])

    def add_params(self, params: Iterable[tuple[str, str]]) -> "QueryStringBuilder":
        """Add ordered parameters ahead of api-version.

        Args:
            params: (name, value) pairs in the order they should appear.

        Returns:
            The builder, for chaining.
        """
        api_version = self._params.pop()
        self._params.extend(params)
        self._params.append(api_version)
        return self

    def build(self) -> str:
        """Render the query string, including the leading ``?``."""
        return "?" + "&".join(
            f"{quote(key, safe='')}={quote(value, safe='')}"
            for key, value in self._params
        )
