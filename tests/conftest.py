"""
Pytest configuration and fixtures.

Markers and pytest fixtures for the test suite.
Profile builders shared by unittest-style tests live in tests/fixtures/profiles.py.
"""

import pytest

from tests.fixtures.profiles import AS_OF, make_job, make_worker


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenarios over full profiles"
    )


@pytest.fixture
def worker():
    return make_worker()


@pytest.fixture
def job():
    return make_job()


@pytest.fixture
def as_of():
    return AS_OF
