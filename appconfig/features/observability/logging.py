"""Structured logging for the configuration client."""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, TextIO

import structlog

from appconfig.features.http.redact import REDACTED_VALUE, is_sensitive_header


# Event keys whose values are key material rather than identifiers
SECRET_EVENT_KEYS = frozenset({"secret", "signature"})

# Third-party loggers that log full request lines at INFO
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def mask_secrets(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Replace secret and credential-header values in a log event.

    Args:
        _logger: Wrapped logger (unused).
        _method_name: Log method name (unused).
        event_dict: Event being rendered.

    Returns:
        The event with sensitive values replaced by [REDACTED].
    """
    for key in event_dict:
        if key in SECRET_EVENT_KEYS or is_sensitive_header(key):
            event_dict[key] = REDACTED_VALUE
    return event_dict


def configure_logging(
    level: int = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> None:
    """Configure structlog for the client and the CLI.

    Events carry an ISO timestamp, the level and any bound request context.
    Secret values are masked before rendering. httpx and httpcore stay at
    WARNING unless ``level`` is DEBUG, since their INFO lines duplicate
    ``request_complete``.

    Args:
        level: Minimum level to emit (default: INFO).
        output: Stream to write to (default: the current stderr).
        json_format: Render JSON lines instead of console output.
    """
    stream = output if output is not None else sys.stderr

    renderer: structlog.types.Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            mask_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=stream, level=level)
    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


def bind_request_context(host: str, credential: str) -> None:
    """Attach the endpoint identity to every following log event.

    Args:
        host: Configuration service host.
        credential: Signing credential identifier (not the secret).
    """
    structlog.contextvars.bind_contextvars(host=host, credential=credential)


def clear_request_context() -> None:
    """Detach the endpoint identity bound by ``bind_request_context``."""
    structlog.contextvars.unbind_contextvars("host", "credential")
