"""
Global pytest configuration and fixtures
"""

import pytest


@pytest.fixture
def earnings_config(settings):
    """Mutable copy of the EARNINGS settings, restored after the test"""
    settings.EARNINGS = dict(getattr(settings, "EARNINGS", {}))
    return settings.EARNINGS
