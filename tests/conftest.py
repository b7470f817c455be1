"""Pytest fixtures for the mythicdns test suite."""

import logging
import logging.handlers
from collections.abc import Generator

import pytest

from mythicdns.exceptions import ZoneResolutionError
from mythicdns.providers.mythicbeasts import MythicBeastsProvider
from mythicdns.zone import ZoneResolver

FAKE_PASSWORDS = "example.com password123"
MOCK_API_URL = "http://mythicbeasts.test/"


class FakeZoneResolver(ZoneResolver):
    """Zone resolver answering from a fixed table instead of DNS.

    Args:
        zones: Zone names (without trailing dot) the resolver knows about.
    """

    def __init__(self, zones: list[str]) -> None:
        self.zones = zones
        self.queries: list[str] = []

    def find_authority_zone(self, fqdn: str) -> str:
        self.queries.append(fqdn)
        labels = fqdn.rstrip(".").split(".")
        for i in range(len(labels)):
            candidate = ".".join(labels[i:])
            if candidate in self.zones:
                return f"{candidate}."
        raise ZoneResolutionError(fqdn.rstrip("."), "no SOA record found")


@pytest.fixture
def zone_resolver() -> FakeZoneResolver:
    """Resolver that knows example.com, example.org and sub.example.org."""
    return FakeZoneResolver(["example.com", "example.org", "sub.example.org"])


@pytest.fixture
def provider(zone_resolver: FakeZoneResolver) -> MythicBeastsProvider:
    """Provider pointed at the mock API with a password for example.com."""
    return MythicBeastsProvider(
        passwords=FAKE_PASSWORDS,
        base_url=MOCK_API_URL,
        zone_resolver=zone_resolver,
    )


class LogCapture:
    """Helper class to capture and inspect log records."""

    def __init__(self, handler: logging.handlers.MemoryHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> list[logging.LogRecord]:
        """Get all captured log records."""
        return self._handler.buffer

    def get_records(
        self, level: int | None = None, name: str | None = None
    ) -> list[logging.LogRecord]:
        """Get log records filtered by level and/or logger name prefix."""
        records = self.records
        if level is not None:
            records = [r for r in records if r.levelno == level]
        if name is not None:
            records = [r for r in records if r.name.startswith(name)]
        return records

    def get_messages(self, level: int | None = None, name: str | None = None) -> list[str]:
        """Get log messages filtered by level and/or logger name prefix."""
        return [r.getMessage() for r in self.get_records(level, name)]

    def clear(self) -> None:
        """Clear all captured log records."""
        self._handler.buffer.clear()


@pytest.fixture
def log_capture() -> Generator[LogCapture]:
    """Capture logs from the mythicdns library during a test.

    Usage:
        def test_something(log_capture):
            # do something that logs
            assert "TXT record created" in log_capture.get_messages(logging.INFO)
    """
    handler = logging.handlers.MemoryHandler(capacity=1000)
    handler.setLevel(logging.DEBUG)

    library_logger = logging.getLogger("mythicdns")
    original_level = library_logger.level
    library_logger.setLevel(logging.DEBUG)
    library_logger.addHandler(handler)

    try:
        yield LogCapture(handler)
    finally:
        library_logger.removeHandler(handler)
        library_logger.setLevel(original_level)
        handler.close()
