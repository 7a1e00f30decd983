"""Configuration schemas."""

from appconfig.features.config.schemas.http import AppConfigurationConfig, HttpConfig


__all__ = ["AppConfigurationConfig", "HttpConfig"]
