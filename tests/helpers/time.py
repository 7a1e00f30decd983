"""Shared, deterministic timestamps for tests."""

from datetime import UTC, datetime


# Fixed timestamp so signatures are reproducible across runs.
FIXED_NOW = datetime(2020, 1, 1, 0, 0, 0, tzinfo=UTC)
FIXED_NOW_HEADER = "Wed, 01 Jan 2020 00:00:00 GMT"


def fixed_clock() -> datetime:
    """Clock that always returns FIXED_NOW."""
    return FIXED_NOW
