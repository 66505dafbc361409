"""
Test configuration and fixtures for earnings tests.
"""

import pytest

from earnings.services.contracts import OvertimePolicy


@pytest.fixture
def policy():
    """Daily overtime after 8h at 125%."""
    return OvertimePolicy(daily_threshold_hours=8.0, daily_multiplier=1.25)


@pytest.fixture
def unlimited_policy():
    """No daily threshold: every hour is regular."""
    return OvertimePolicy(daily_threshold_hours=None, daily_multiplier=1.25)
