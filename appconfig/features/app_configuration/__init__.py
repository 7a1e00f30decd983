"""Configuration setting retrieval with entity-tag refresh."""

from appconfig.features.app_configuration.fetcher import ConfigurationFetcher
from appconfig.features.app_configuration.models import ConfigurationSetting


__all__ = ["ConfigurationFetcher", "ConfigurationSetting"]
