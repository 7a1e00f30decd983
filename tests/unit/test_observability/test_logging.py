"""Unit tests for structured logging setup."""

import io
import json
import logging

import structlog

from appconfig.features.observability import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    mask_secrets,
)


def read_events(stream: io.StringIO) -> list[dict[str, object]]:
    """Parse JSON log lines written to a stream."""
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestMaskSecrets:
    """Tests for the secret masking processor."""

    def test_masks_secret_and_authorization(self) -> None:
        """Test that key material and credential headers are masked."""
        event = {
            "event": "request_signed",
            "secret": "c3VwZXItc2VjcmV0LWtleQ==",
            "Authorization": "HMAC-SHA256 Credential=c&Signature=s",
            "credential": "test-credential",
        }

        result = mask_secrets(None, "info", event)

        assert result["secret"] == "[REDACTED]"
        assert result["Authorization"] == "[REDACTED]"
        assert result["credential"] == "test-credential"
        assert result["event"] == "request_signed"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_with_level_filter(self) -> None:
        """Test that events render as JSON and lower levels are dropped."""
        stream = io.StringIO()
        configure_logging(level=logging.INFO, output=stream, json_format=True)
        log = structlog.get_logger()

        log.debug("hidden")
        log.info("setting_fetched", key="interval", secret="abc")

        events = read_events(stream)
        assert len(events) == 1
        assert events[0]["event"] == "setting_fetched"
        assert events[0]["level"] == "info"
        assert events[0]["secret"] == "[REDACTED]"
        assert "timestamp" in events[0]

    def test_transport_loggers_quiet_unless_debug(self) -> None:
        """Test that httpx logging is raised to WARNING outside debug."""
        configure_logging(level=logging.INFO, output=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING

        configure_logging(level=logging.DEBUG, output=io.StringIO())
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_console_output(self) -> None:
        """Test that console rendering includes the event name."""
        stream = io.StringIO()
        configure_logging(level=logging.INFO, output=stream, json_format=False)

        structlog.get_logger().info("config_file_loaded")

        assert "config_file_loaded" in stream.getvalue()


class TestRequestContext:
    """Tests for request context binding."""

    def test_bind_and_clear(self) -> None:
        """Test that host and credential appear only while bound."""
        stream = io.StringIO()
        configure_logging(level=logging.INFO, output=stream)
        log = structlog.get_logger()

        bind_request_context("example.azconfig.io", "test-credential")
        log.info("bound")
        clear_request_context()
        log.info("cleared")

        bound, cleared = read_events(stream)
        assert bound["host"] == "example.azconfig.io"
        assert bound["credential"] == "test-credential"
        assert "host" not in cleared
        assert "credential" not in cleared
