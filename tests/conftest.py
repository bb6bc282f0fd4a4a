"""
Pytest configuration and shared fixtures for cratedocs tests.
"""

import logging
import sys
from pathlib import Path

import pytest


# Make the packages importable without installing
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class FakeResponse:
    """Stands in for an aiohttp response used as `async with session.get(...)`."""

    def __init__(self, status=200, body=""):
        self.status = status
        self.body = body

    async def text(self, encoding=None, errors="strict"):
        if isinstance(self.body, Exception):
            raise self.body
        if isinstance(self.body, bytes):
            # Same decoding as aiohttp: strict unless the caller says otherwise
            return self.body.decode(encoding or "utf-8", errors)
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """
    Minimal aiohttp.ClientSession replacement.

    `responses` maps URL to a FakeResponse or an exception to raise. Unknown
    URLs get `default`, a 404 unless given.
    """

    def __init__(self, responses=None, default=None):
        self.responses = responses or {}
        self.default = default or FakeResponse(status=404)
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        result = self.responses.get(url, self.default)
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self):
        self.closed = True


@pytest.fixture
def logger():
    """Quiet logger for functions that take one explicitly."""
    test_logger = logging.getLogger("cratedocs.tests")
    test_logger.addHandler(logging.NullHandler())
    test_logger.propagate = False
    return test_logger


@pytest.fixture
def fake_session():
    return FakeSession()
