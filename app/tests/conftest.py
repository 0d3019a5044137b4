"""Shared fixtures for the whole test suite."""

import pytest

from i18n_datastore.logging import clear_request_context


@pytest.fixture(autouse=True)
def isolated_log_context():
    """Ensure request context never leaks between tests."""
    clear_request_context()
    yield
    clear_request_context()
