"""Configuration file loader with validation."""

import hashlib
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from appconfig.features.config.constants import COMPONENT_CONFIG
from appconfig.features.config.schemas.http import AppConfigurationConfig


logger = structlog.get_logger()


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


def _compute_checksum(content: bytes) -> str:
    """Compute SHA-256 checksum of content."""
    return hashlib.sha256(content).hexdigest()


def load_config(path: Path) -> AppConfigurationConfig:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed or fails validation.
    """
    log = logger.bind(component=COMPONENT_CONFIG, file_path=str(path))

    content_bytes = path.read_bytes()
    checksum = _compute_checksum(content_bytes)

    try:
        data = yaml.safe_load(content_bytes.decode("utf-8")) or {}
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        error_type = (
            "encoding_error" if isinstance(e, UnicodeDecodeError) else "yaml_error"
        )
        errors = [{"loc": "", "msg": str(e), "type": error_type}]
        log.error("config_parse_failed", errors=errors)
        raise ConfigValidationError(errors, str(path)) from e

    try:
        config = AppConfigurationConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        log.error(
            "config_validation_failed",
            validation_error_count=len(errors),
            errors=errors,
        )
        raise ConfigValidationError(errors, str(path)) from e

    log.info(
        "config_file_loaded",
        file_sha256=checksum,
        host=config.http_config.host,
        api_version=config.http_config.api_version,
    )
    return config
