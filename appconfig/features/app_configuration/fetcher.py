"""Unconditional and conditional retrieval of configuration settings."""

from urllib.parse import quote

import structlog

from appconfig.features.app_configuration.models import ConfigurationSetting
from appconfig.features.http.constants import HEADER_IF_NONE_MATCH
from appconfig.features.http.protocols import HttpTransport


logger = structlog.get_logger()

KEY_VALUE_PATH_PREFIX = "/kv/"
LABEL_PARAM = "label"


def _key_path(key: str) -> str:
    # Keys may hold reserved characters such as "?", "#" or "/"
    return KEY_VALUE_PATH_PREFIX + quote(key, safe="")


def _label_params(label: str | None) -> list[tuple[str, str]] | None:
    if label is None:
        return None
    return [(LABEL_PARAM, label)]


class ConfigurationFetcher:
    """Reads settings from the configuration service.

    Errors from the transport (``TransportError``, ``NotFoundError``,
    ``SigningError``) and from decoding (``DecodeError``) propagate to the
    caller unchanged.
    """

    def __init__(self, transport: HttpTransport) -> None:
        """Initialize the fetcher.

        Args:
            transport: Transport used to issue signed GET requests.
        """
        self._transport = transport
        self._log = logger.bind(component="app_configuration")

    async def get(self, key: str, label: str | None = None) -> ConfigurationSetting:
        """Fetch a setting by key and optional label.

        Args:
            key: Setting key.
            label: Optional label selecting one of several same-key entries.

        Returns:
            The decoded setting.
        """
        response = await self._transport.get(
            _key_path(key),
            query_params=_label_params(label),
        )
        setting = ConfigurationSetting.from_json(response.body_bytes)
        self._log.debug("setting_fetched", key=key, label=label, etag=setting.etag)
        return setting

    async def get_conditional(
        self, setting: ConfigurationSetting
    ) -> ConfigurationSetting | None:
        """Re-fetch a setting only if it changed since ``setting`` was read.

        Args:
            setting: Previously fetched setting; its etag is sent in
                If-None-Match.

        Returns:
            None when the service answers 304 (the cached copy is still
            valid), otherwise the fresh setting.
        """
        response = await self._transport.get(
            _key_path(setting.key),
            query_params=_label_params(setting.label),
            headers=[(HEADER_IF_NONE_MATCH, f'"{setting.etag}"')],
        )

        if response.is_not_modified:
            self._log.debug(
                "setting_not_modified", key=setting.key, label=setting.label
            )
            return None

        fresh = ConfigurationSetting.from_json(response.body_bytes)
        self._log.debug(
            "setting_refreshed",
            key=fresh.key,
            label=fresh.label,
            previous_etag=setting.etag,
            etag=fresh.etag,
        )
        return fresh
