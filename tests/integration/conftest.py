"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_RETTIWT_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_RETTIWT_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_RETTIWT_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def api_key():
    """Cookie string of a logged-in session, if provided."""
    key = os.environ.get("RETTIWT_API_KEY")
    if not key:
        pytest.skip("Set RETTIWT_API_KEY to run user-authenticated tests")
    return key
