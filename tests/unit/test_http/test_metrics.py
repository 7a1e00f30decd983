"""Unit tests for HTTP metrics."""

from appconfig.features.http.errors import TransportErrorClass
from appconfig.features.http.metrics import HttpMetrics


class TestHttpMetrics:
    """Tests for HttpMetrics."""

    def test_singleton(self) -> None:
        """Test get_instance returns the same object until reset."""
        first = HttpMetrics.get_instance()
        assert HttpMetrics.get_instance() is first

        HttpMetrics.reset()

        assert HttpMetrics.get_instance() is not first

    def test_records_responses_and_failures(self) -> None:
        """Test every counter is reflected in to_dict."""
        metrics = HttpMetrics.get_instance()
        metrics.record_response(200, 100, 10.0)
        metrics.record_response(304, 0, 30.0)
        metrics.record_response(503, 20, 5.0)
        metrics.record_failure(TransportErrorClass.HTTP_5XX)
        metrics.record_failure(TransportErrorClass.NETWORK_TIMEOUT)
        metrics.record_signing_failure()

        assert metrics.to_dict() == {
            "http_requests_total": {200: 1, 304: 1, 503: 1},
            "http_not_modified_total": 1,
            "http_failures_total": {"HTTP_5XX": 1, "NETWORK_TIMEOUT": 1},
            "signing_failures_total": 1,
            "http_bytes_total": 120,
            "http_request_count": 3,
            "avg_duration_ms": 15.0,
            "max_duration_ms": 30.0,
        }

    def test_not_modified_counted_from_status(self) -> None:
        """Test a 304 response increments the not-modified counter."""
        metrics = HttpMetrics.get_instance()

        metrics.record_response(200, 5, 1.0)
        metrics.record_response(304, 0, 1.0)
        metrics.record_response(304, 0, 1.0)

        assert metrics.http_not_modified_total == 2

    def test_avg_duration_without_requests(self) -> None:
        """Test the average is zero before any response."""
        metrics = HttpMetrics.get_instance()

        assert metrics.avg_duration_ms == 0.0
        assert metrics.http_request_count == 0
