"""Pytest configuration and fixtures."""

import pytest

from namerec.clause import reset_default_config


@pytest.fixture(autouse=True)
def default_config():
    """Restore the default ClauseConfig after every test."""
    yield
    reset_default_config()
