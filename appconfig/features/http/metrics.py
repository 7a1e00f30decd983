"""In-process counters for signed HTTP traffic."""

from collections import Counter
from dataclasses import dataclass, field
from typing import ClassVar

from appconfig.features.http.constants import HTTP_STATUS_NOT_MODIFIED
from appconfig.features.http.errors import TransportErrorClass


@dataclass
class HttpMetrics:
    """Process-wide counters for the signed HTTP client.

    One instance is shared by every client (``get_instance``); tests call
    ``reset`` to start from zero. Failures are counted per
    ``TransportErrorClass`` value; requests that never left the process
    because signing failed are counted separately.
    """

    http_requests_total: Counter[int] = field(default_factory=Counter)
    http_not_modified_total: int = 0
    http_failures_total: Counter[str] = field(default_factory=Counter)
    signing_failures_total: int = 0
    http_bytes_total: int = 0
    http_duration_ms_total: float = 0.0
    http_duration_ms_max: float = 0.0

    _instance: ClassVar["HttpMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "HttpMetrics":
        """Get the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so counting starts over."""
        cls._instance = None

    @property
    def http_request_count(self) -> int:
        """Number of responses received, whatever their status."""
        return sum(self.http_requests_total.values())

    @property
    def avg_duration_ms(self) -> float:
        """Mean round-trip time, or 0.0 before the first response."""
        count = self.http_request_count
        return self.http_duration_ms_total / count if count else 0.0

    def record_response(
        self, status_code: int, bytes_received: int, duration_ms: float
    ) -> None:
        """Count one response.

        Args:
            status_code: Response status; 304 also counts as not-modified.
            bytes_received: Body size in bytes.
            duration_ms: Round-trip time in milliseconds.
        """
        self.http_requests_total[status_code] += 1
        if status_code == HTTP_STATUS_NOT_MODIFIED:
            self.http_not_modified_total += 1
        self.http_bytes_total += bytes_received
        self.http_duration_ms_total += duration_ms
        self.http_duration_ms_max = max(self.http_duration_ms_max, duration_ms)

    def record_failure(self, error_class: TransportErrorClass) -> None:
        """Count a request that ended in a TransportError."""
        self.http_failures_total[error_class.value] += 1

    def record_signing_failure(self) -> None:
        self.signing_failures_total += 1

    def to_dict(self) -> dict[str, object]:
        """Export counters as plain values, e.g. for a status report."""
        return {
            "http_requests_total": dict(self.http_requests_total),
            "http_not_modified_total": self.http_not_modified_total,
            "http_failures_total": dict(self.http_failures_total),
            "signing_failures_total": self.signing_failures_total,
            "http_bytes_total": self.http_bytes_total,
            "http_request_count": self.http_request_count,
            "avg_duration_ms": round(self.avg_duration_ms, 2),
            "max_duration_ms": round(self.http_duration_ms_max, 2),
        }
