"""Configuration loading for the App Configuration client."""

from appconfig.features.config.loader import ConfigValidationError, load_config
from appconfig.features.config.schemas import AppConfigurationConfig, HttpConfig


__all__ = [
    "AppConfigurationConfig",
    "ConfigValidationError",
    "HttpConfig",
    "load_config",
]
