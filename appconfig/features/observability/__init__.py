"""Structured logging setup and request context binding."""

from appconfig.features.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    mask_secrets,
)


__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "mask_secrets",
]
