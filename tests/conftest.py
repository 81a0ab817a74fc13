"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from ticktime.config import reset_ticktime_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the ticktime config before and after each test for isolation.

    The config is a module-level singleton that persists across tests.
    This fixture ensures each test starts with the system clock and
    contract checks enabled.
    """
    reset_ticktime_config()
    yield
    reset_ticktime_config()
    structlog.reset_defaults()
