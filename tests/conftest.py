"""Shared fixtures for retry tests."""

from unittest.mock import patch

import pytest


@pytest.fixture
def sleep():
    """Replace time.sleep so no test actually waits."""
    with patch("retrykit.retry.controller.time.sleep") as mock_sleep:
        yield mock_sleep
