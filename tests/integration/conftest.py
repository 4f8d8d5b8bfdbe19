"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_GITLAB_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_GITLAB_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_GITLAB_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def project_id() -> str:
    """Project the integration tests write issues, notes and releases to."""
    project = os.environ.get("GITLAB_TEST_PROJECT")
    if not project:
        pytest.skip("Set GITLAB_TEST_PROJECT to a writable project path or id")
    return project
